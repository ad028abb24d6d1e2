"""
Keyword tables for job-description matching.

All terms are lowercase and matched by substring containment against the
lowercased job description. Labels with a {first_name} placeholder are filled
from the profile identity.
"""

# =============================================================================
# SKILL AND GOAL PREDICATES
# =============================================================================

# Skills reported whenever mentioned, even if the profile does not list them
ALWAYS_RECOGNIZED_SKILLS = {
    "python": "Python",
}

BACKEND_TERMS = ("backend", "api", "rest")
BACKEND_GOAL = "Backend development focus"

SENIORITY_TERMS = ("junior", "mid", "mid-level")
SENIORITY_GOAL = "Appropriate seniority level"

REMOTE_TERMS = ("remote",)
REMOTE_GOAL = "Remote work option"

# =============================================================================
# GAP PREDICATES
# =============================================================================

SENIOR_TERM = "senior"
SENIOR_EXCLUSIONS = ("junior", "mid")
SENIOR_GAP = "Position may require senior-level experience"

FRONTEND_TERM = "frontend"
FRONTEND_EXCLUSIONS = ("backend",)
FRONTEND_FOCUS_GAP = "Position may be frontend-focused ({first_name}'s strength is backend)"

FRONTEND_FRAMEWORK_TERMS = ("react", "angular", "vue")
FRONTEND_FRAMEWORK_EXCLUSIONS = ("backend", "full stack")
FRONTEND_EXPERTISE_GAP = (
    "Position may require more frontend expertise than {first_name}'s primary focus"
)

# =============================================================================
# SCORING
# =============================================================================

SKILL_RATIO_WEIGHT = 60
GOAL_WEIGHT = 20
GAP_PENALTY = 0.1
GAP_PENALTY_WEIGHT = 20

# Tier thresholds, highest first: (minimum percentage, tier name)
SCORE_TIERS = (
    (80, "STRONG MATCH"),
    (60, "GOOD MATCH"),
    (40, "MODERATE MATCH"),
    (0, "LOW MATCH"),
)

LIMITED_MATCH_SUMMARY = "Limited match found. Review the job requirements carefully."
