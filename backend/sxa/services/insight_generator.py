"""
Rule-based coaching insights

Rules run in table order and every rule is evaluated; the result keeps the
first MAX_INSIGHTS messages. Reordering RULES changes which insights surface
when more than MAX_INSIGHTS rules fire.
"""

from typing import Callable, List, NamedTuple

from sxa.models.analysis import Metrics, RawScores

MAX_INSIGHTS = 5

WEAK_SCORE = 65
STRONG_SCORE = 80
MIN_KNEE_ANGLE = 80
MAX_KNEE_ANGLE = 160


class InsightRule(NamedTuple):
    name: str
    applies: Callable[[RawScores, Metrics], bool]
    message: str  # may reference {sport}


RULES: List[InsightRule] = [
    InsightRule(
        "form_low", lambda s, m: s.form < WEAK_SCORE,
        "Work on joint alignment — your form score indicates suboptimal positioning during key phases."),
    InsightRule(
        "power_low", lambda s, m: s.power < WEAK_SCORE,
        "Power output is below average for your sport. Add plyometric or resistance exercises."),
    InsightRule(
        "consistency_low", lambda s, m: s.consistency < WEAK_SCORE,
        "Movement variability is high. Focus on drilling the same technique repeatedly."),
    InsightRule(
        "balance_low", lambda s, m: s.balance < WEAK_SCORE,
        "Centre of mass shifts detected. Single-leg balance work can help stabilise your base."),
    InsightRule(
        "timing_low", lambda s, m: s.timing < WEAK_SCORE,
        "Phase timing is off — practice slow-motion drills to reinforce the correct sequence."),
    InsightRule(
        "knee_bend_excessive", lambda s, m: m.knee_angle < MIN_KNEE_ANGLE,
        "Knee bend is excessive at key moment. Check your stance width and foot placement."),
    InsightRule(
        "knee_too_straight", lambda s, m: m.knee_angle > MAX_KNEE_ANGLE,
        "Legs too straight — increase knee flexion for better shock absorption."),
    InsightRule(
        "form_excellent", lambda s, m: s.form >= STRONG_SCORE,
        "Excellent {sport} form! Maintain this technique under fatigue."),
    InsightRule(
        "consistency_high", lambda s, m: s.consistency >= STRONG_SCORE,
        "Highly consistent movement patterns — great for competition repeatability."),
]


def generate_insights(scores: RawScores, metrics: Metrics, sport_name: str) -> List[str]:
    """Evaluate every rule in order and return at most MAX_INSIGHTS messages"""
    insights = [
        rule.message.format(sport=sport_name)
        for rule in RULES
        if rule.applies(scores, metrics)
    ]
    return insights[:MAX_INSIGHTS]
