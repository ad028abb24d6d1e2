"""
Assistant Context

Responsibilities:
- Routes free-text questions to one of a fixed set of answer templates
- Renders profile fields into prose answers

Owns: Routing rule order, answer templates
Never: Loads data or understands language beyond keyword containment
"""

from folio.contexts.assistant.question_router import (
    DEFAULT_RULE,
    ROUTING_RULES,
    QuestionRouter,
    RoutingRule,
    route,
)

__all__ = ["QuestionRouter", "RoutingRule", "ROUTING_RULES", "DEFAULT_RULE", "route"]
