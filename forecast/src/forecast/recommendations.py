"""Ranked daily guidance from moon phase, retrogrades and domain scores."""

from __future__ import annotations

import logging
from typing import NamedTuple

from cosmic_calendar.schemas.cosmic_day import Recommendation
from cosmic_calendar.schemas.ephemeris import LifeDomain, MoonPhase, Planet, PlanetaryAspect

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 6
HIGH_SCORE_THRESHOLD = 7.5
LOW_SCORE_THRESHOLD = 4.0


class Template(NamedTuple):
    domain: LifeDomain
    title: str
    description: str
    is_positive: bool
    priority: int

    def build(self) -> Recommendation:
        return Recommendation(
            domain=self.domain,
            title=self.title,
            description=self.description,
            is_positive=self.is_positive,
            priority=self.priority,
        )


_BUILD_MOMENTUM = Template(
    LifeDomain.CAREER,
    "Build Momentum",
    "Take action on your goals. The waxing moon supports growth and forward movement.",
    True,
    2,
)

MOON_PHASE_TEMPLATES: dict[MoonPhase, tuple[Template, ...]] = {
    MoonPhase.NEW_MOON: (
        Template(
            LifeDomain.CAREER,
            "Set New Intentions",
            "The new moon is perfect for starting fresh projects and setting goals for the coming weeks.",
            True,
            3,
        ),
        Template(
            LifeDomain.HEALTH,
            "Begin a Wellness Routine",
            "Start that new health habit you've been considering. The energy supports fresh starts.",
            True,
            2,
        ),
    ),
    MoonPhase.WAXING_CRESCENT: (_BUILD_MOMENTUM,),
    MoonPhase.WAXING_GIBBOUS: (_BUILD_MOMENTUM,),
    MoonPhase.FIRST_QUARTER: (
        Template(
            LifeDomain.CAREER,
            "Face Challenges Head-On",
            "This is a time for decisive action. Overcome obstacles blocking your progress.",
            True,
            2,
        ),
    ),
    MoonPhase.FULL_MOON: (
        Template(
            LifeDomain.RELATIONSHIPS,
            "Express Your Feelings",
            "Emotions are heightened. It's a powerful time for heart-to-heart conversations.",
            True,
            3,
        ),
        Template(
            LifeDomain.HEALTH,
            "Practice Grounding",
            "Full moon energy can feel intense. Stay grounded with meditation or nature walks.",
            True,
            2,
        ),
    ),
    MoonPhase.WANING_GIBBOUS: (
        Template(
            LifeDomain.RELATIONSHIPS,
            "Share Your Wisdom",
            "A good time to mentor others or express gratitude to those who've helped you.",
            True,
            1,
        ),
    ),
    MoonPhase.LAST_QUARTER: (
        Template(
            LifeDomain.HEALTH,
            "Release What No Longer Serves",
            "Let go of old habits, grudges, or patterns that are holding you back.",
            True,
            2,
        ),
    ),
    MoonPhase.WANING_CRESCENT: (
        Template(
            LifeDomain.HEALTH,
            "Rest and Recharge",
            "Honor your need for rest. This is a time for reflection, not action.",
            True,
            3,
        ),
        Template(
            LifeDomain.CAREER,
            "Avoid Major Decisions",
            "Wait for the new moon before launching new projects or making big commitments.",
            False,
            2,
        ),
    ),
}

# Checked in this planet order
RETROGRADE_TEMPLATES: dict[Planet, tuple[Template, ...]] = {
    Planet.MERCURY: (
        Template(
            LifeDomain.CAREER,
            "Double-Check Communications",
            "Mercury retrograde can cause misunderstandings. Review emails before sending and confirm appointments.",
            False,
            4,
        ),
        Template(
            LifeDomain.CAREER,
            "Back Up Your Data",
            "Technology glitches are common during Mercury retrograde. Protect your important files.",
            False,
            3,
        ),
        Template(
            LifeDomain.RELATIONSHIPS,
            "Pause Before Reacting",
            "Misunderstandings are likely. Take a breath before responding to avoid conflict.",
            False,
            3,
        ),
    ),
    Planet.VENUS: (
        Template(
            LifeDomain.RELATIONSHIPS,
            "Reflect on Relationship Patterns",
            "Venus retrograde invites you to examine what you truly value in relationships.",
            True,
            3,
        ),
        Template(
            LifeDomain.RELATIONSHIPS,
            "Avoid New Relationships",
            "Wait until Venus goes direct before starting a new romance or making relationship commitments.",
            False,
            4,
        ),
    ),
    Planet.MARS: (
        Template(
            LifeDomain.HEALTH,
            "Pace Yourself",
            "Energy levels may be lower than usual. Focus on completing rather than starting.",
            False,
            3,
        ),
        Template(
            LifeDomain.CAREER,
            "Avoid Aggressive Action",
            "Mars retrograde can lead to frustration. Channel energy into planning rather than pushing forward.",
            False,
            2,
        ),
    ),
}

# domain -> (high-score template, low-score template)
DOMAIN_TEMPLATES: dict[LifeDomain, tuple[Template, Template]] = {
    LifeDomain.RELATIONSHIPS: (
        Template(
            LifeDomain.RELATIONSHIPS,
            "Reach Out to Loved Ones",
            "Today's cosmic energy supports meaningful connections. Initiate plans with someone special.",
            True,
            2,
        ),
        Template(
            LifeDomain.RELATIONSHIPS,
            "Practice Self-Love",
            "Turn inward today. Journaling or solo activities will feel more nourishing than socializing.",
            False,
            2,
        ),
    ),
    LifeDomain.CAREER: (
        Template(
            LifeDomain.CAREER,
            "Take Initiative",
            "The stars favor bold career moves. Pitch that idea, ask for what you deserve.",
            True,
            2,
        ),
        Template(
            LifeDomain.CAREER,
            "Focus on Routine Tasks",
            "Not ideal for major decisions or negotiations. Stick to your to-do list.",
            False,
            2,
        ),
    ),
    LifeDomain.HEALTH: (
        Template(
            LifeDomain.HEALTH,
            "High Energy Day",
            "Great day for exercise, outdoor activities, or starting a new wellness practice.",
            True,
            2,
        ),
        Template(
            LifeDomain.HEALTH,
            "Gentle Self-Care",
            "Your body needs extra rest. Prioritize sleep, hydration, and gentle movement.",
            False,
            2,
        ),
    ),
}


def moon_phase_recommendations(moon_phase: MoonPhase) -> list[Recommendation]:
    return [template.build() for template in MOON_PHASE_TEMPLATES.get(moon_phase, ())]


def retrograde_recommendations(retrogrades: list[Planet]) -> list[Recommendation]:
    out: list[Recommendation] = []
    for planet, templates in RETROGRADE_TEMPLATES.items():
        if planet in retrogrades:
            out.extend(template.build() for template in templates)
    return out


def domain_recommendations(scores: dict[LifeDomain, float]) -> list[Recommendation]:
    out: list[Recommendation] = []
    for domain, (high, low) in DOMAIN_TEMPLATES.items():
        score = scores[domain]
        if score >= HIGH_SCORE_THRESHOLD:
            out.append(high.build())
        elif score <= LOW_SCORE_THRESHOLD:
            out.append(low.build())
    return out


def generate_recommendations(
    moon_phase: MoonPhase,
    retrogrades: list[Planet],
    aspects: list[PlanetaryAspect],
    relationship_score: float,
    career_score: float,
    health_score: float,
) -> list[Recommendation]:
    """Generate up to six recommendations, highest priority first.

    Equal priorities keep generation order: moon phase, then retrogrades,
    then domain thresholds. ``aspects`` is accepted for interface parity and
    does not contribute templates.
    """
    recommendations = moon_phase_recommendations(moon_phase)
    recommendations.extend(retrograde_recommendations(retrogrades))
    recommendations.extend(
        domain_recommendations(
            {
                LifeDomain.RELATIONSHIPS: relationship_score,
                LifeDomain.CAREER: career_score,
                LifeDomain.HEALTH: health_score,
            }
        )
    )

    ranked = sorted(recommendations, key=lambda r: r.priority, reverse=True)
    return ranked[:MAX_RECOMMENDATIONS]
