"""
Keyword routing for the "ask me" question box.

A question is lowercased and checked against an ordered table of routing rules.
The first rule with a matching keyword answers; a question that mentions both
"experience" and "skills" therefore gets the background answer, because the
background rule comes first. Keywords are plain substring tests.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from folio.contexts.assistant.logger import _log_debug, log_routing_decision
from folio.contexts.assistant.responses import (
    ResponseContext,
    background_response,
    default_response,
    education_response,
    seeking_response,
    strengths_response,
    technologies_response,
    work_style_response,
)
from folio.contexts.profile import ClassificationPolicy, Profile
from folio.utils.settings import NarrativeSettings


@dataclass(frozen=True)
class RoutingRule:
    """
    Keyword predicate paired with the template that answers it.

    Attributes:
        name: Rule identifier (e.g., "background")
        keywords: Lowercase substrings, any of which selects this rule
        respond: Template producing the answer (None means "nothing to say")
    """

    name: str
    keywords: Tuple[str, ...]
    respond: Callable[[ResponseContext], Optional[str]]

    def matches(self, normalized_question: str) -> bool:
        return any(keyword in normalized_question for keyword in self.keywords)


# Evaluation order is significant: first match wins
ROUTING_RULES: Tuple[RoutingRule, ...] = (
    RoutingRule("background", ("background", "experience", "history"), background_response),
    RoutingRule("strengths", ("strength", "skill", "expertise", "good at"), strengths_response),
    RoutingRule(
        "technologies",
        ("technolog", "tech stack", "tools", "language", "framework"),
        technologies_response,
    ),
    RoutingRule(
        "seeking", ("looking for", "seeking", "want", "role", "position"), seeking_response
    ),
    RoutingRule(
        "work_style", ("work style", "approach", "values", "philosophy"), work_style_response
    ),
    RoutingRule("education", ("education", "degree", "school"), education_response),
)

DEFAULT_RULE = RoutingRule("default", (), default_response)


class QuestionRouter:
    """
    Maps free-text questions to canned answers built from the profile.

    Usage:
        router = QuestionRouter(settings.assistant, settings.timeline.policy)
        answer = router.route("What are your strengths?", profile)
    """

    def __init__(
        self,
        narrative: Optional[NarrativeSettings] = None,
        policy: ClassificationPolicy = ClassificationPolicy.FIELD,
        rules: Sequence[RoutingRule] = ROUTING_RULES,
    ):
        self.narrative = narrative or NarrativeSettings()
        self.policy = ClassificationPolicy(policy)
        self.rules = tuple(rules)

    def match_rule(self, question: str) -> RoutingRule:
        """Return the first rule whose keywords appear in the question, else the default."""
        normalized = (question or "").lower()
        for rule in self.rules:
            if rule.matches(normalized):
                return rule
        return DEFAULT_RULE

    def route(self, question: str, profile: Optional[Profile]) -> str:
        """
        Answer a question from the profile.

        Args:
            question: Free-text question (any string, including empty)
            profile: Loaded profile; None or the fallback profile yields an apology

        Returns:
            Non-empty answer text
        """
        if profile is None or profile.is_fallback:
            return self.narrative.unavailable

        context = ResponseContext(profile=profile, narrative=self.narrative, policy=self.policy)
        rule = self.match_rule(question)
        log_routing_decision(question or "", rule.name)

        answer = rule.respond(context)
        if not answer:
            _log_debug(f"Rule {rule.name} had nothing to say, using default answer")
            answer = default_response(context)
        return answer


def route(
    question: str,
    profile: Optional[Profile],
    narrative: Optional[NarrativeSettings] = None,
    policy: ClassificationPolicy = ClassificationPolicy.FIELD,
) -> str:
    """Convenience wrapper: route one question with a throwaway router."""
    return QuestionRouter(narrative, policy).route(question, profile)
