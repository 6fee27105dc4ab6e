"""
Point tables for the CRS (Comprehensive Ranking System) points engine.

Every threshold lives here as data. A `StepTable` maps a numeric key to the
value of the highest breakpoint that does not exceed it, so a table reads the
same way the published grids do: "CLB 9 or more -> 31".

Tables that differ for candidates with an accompanying spouse are stored as
`{False: single_table, True: accompanied_table}`.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterable

from models.profile import EducationLevel


class StepTable:
    """Sorted breakpoints -> value lookup. Keys below the first breakpoint get `below`."""

    def __init__(self, steps: Iterable[tuple[float, int]], below: int = 0):
        ordered = sorted(steps)
        self.breakpoints = tuple(k for k, _ in ordered)
        self.values = tuple(v for _, v in ordered)
        self.below = below

    def lookup(self, key: float | None) -> int:
        if key is None or key != key:
            return self.below
        idx = bisect_right(self.breakpoints, key) - 1
        if idx < 0:
            return self.below
        return self.values[idx]

    @property
    def maximum(self) -> int:
        return max(self.values + (self.below,))

    def __repr__(self) -> str:
        steps = ", ".join(f"{k}->{v}" for k, v in zip(self.breakpoints, self.values))
        return f"StepTable({steps}; below={self.below})"


# --- Core: age (every integer 18-45 has an entry, 17 and under score 0) ---
AGE_POINTS = {
    False: StepTable([
        (18, 99), (19, 105), (20, 110), (30, 105), (31, 99), (32, 94),
        (33, 88), (34, 83), (35, 77), (36, 72), (37, 66), (38, 61),
        (39, 55), (40, 50), (41, 39), (42, 28), (43, 17), (44, 6), (45, 0),
    ]),
    True: StepTable([
        (18, 90), (19, 95), (20, 100), (30, 95), (31, 90), (32, 85),
        (33, 80), (34, 75), (35, 70), (36, 65), (37, 60), (38, 55),
        (39, 50), (40, 45), (41, 35), (42, 25), (43, 15), (44, 5), (45, 0),
    ]),
}

# --- Core: education (single, accompanied). Certificates are scored under transferability. ---
EDUCATION_POINTS = {
    EducationLevel.HIGH_SCHOOL: (30, 28),
    EducationLevel.ONE_YEAR_DIPLOMA: (90, 84),
    EducationLevel.TWO_YEAR_DIPLOMA: (98, 91),
    EducationLevel.BACHELORS: (120, 112),
    EducationLevel.TWO_OR_MORE_DEGREES: (128, 119),
    EducationLevel.MASTERS: (135, 126),
    EducationLevel.PHD: (150, 140),
}

# --- Core: language, keyed by effective CLB ---
MIN_SCORING_CLB = 4

FIRST_LANGUAGE_POINTS = {
    False: StepTable([(4, 6), (6, 9), (7, 17), (8, 23), (9, 31), (10, 34)]),
    True: StepTable([(4, 6), (6, 8), (7, 16), (8, 22), (9, 29), (10, 32)]),
}

SECOND_LANGUAGE_POINTS = StepTable([(5, 1), (7, 3), (9, 6)])

# --- Core: Canadian work experience, keyed by qualifying years ---
CANADIAN_EXPERIENCE_POINTS = {
    False: StepTable([(1, 40), (2, 53), (3, 64), (4, 72), (5, 80)]),
    True: StepTable([(1, 35), (2, 46), (3, 56), (4, 63), (5, 70)]),
}

# --- Work duration weighting (hours per week -> share of each month that counts) ---
FULL_TIME_HOURS = 30
PART_TIME_HOURS = 15
PART_TIME_WEIGHT = 0.5

# --- Spouse factors ---
SPOUSE_EDUCATION_POINTS = {
    EducationLevel.HIGH_SCHOOL: 2,
    EducationLevel.ONE_YEAR_DIPLOMA: 6,
    EducationLevel.TWO_YEAR_DIPLOMA: 7,
    EducationLevel.BACHELORS: 8,
    EducationLevel.TWO_OR_MORE_DEGREES: 9,
    EducationLevel.MASTERS: 10,
    EducationLevel.PHD: 10,
}

# Per skill, per language record
SPOUSE_LANGUAGE_SKILL_POINTS = StepTable([(5, 1), (7, 3), (9, 5)])
SPOUSE_LANGUAGE_CAP = 20

SPOUSE_EXPERIENCE_POINTS = StepTable([(1, 3), (2, 5), (3, 8), (5, 10)])

# --- Skill transferability ---
DEGREE_LEVELS = frozenset({
    EducationLevel.BACHELORS,
    EducationLevel.TWO_OR_MORE_DEGREES,
    EducationLevel.MASTERS,
    EducationLevel.PHD,
})

# Degree (or certificate) combined with the highest effective CLB
CLB_COMBINATION_POINTS = StepTable([(7, 25), (9, 50)])

# Degree combined with Canadian qualifying years
CANADIAN_EXPERIENCE_COMBINATION_POINTS = StepTable([(1, 25), (2, 50)])

# Foreign years are bucketed into 1-2 years (short) and 3+ years (long)
MIN_FOREIGN_YEARS = 1
LONG_FOREIGN_YEARS = 3

FOREIGN_LANGUAGE_POINTS = {
    False: StepTable([(7, 13), (9, 25)]),
    True: StepTable([(7, 25), (9, 50)]),
}

FOREIGN_CANADIAN_POINTS = {
    False: StepTable([(1, 13), (2, 25)]),
    True: StepTable([(1, 25), (2, 50)]),
}

SKILL_TRANSFERABILITY_CAP = 100

# --- Additional points ---
PROVINCIAL_NOMINATION_POINTS = 600
RELATIVES_IN_CANADA_POINTS = 15

JOB_OFFER_SENIOR_PREFIX = "00"
JOB_OFFER_SENIOR_POINTS = 200
JOB_OFFER_SKILLED_FIRST_DIGITS = frozenset("0123")
JOB_OFFER_SKILLED_POINTS = 50

CANADIAN_EDUCATION_COUNTRY = "canada"
CANADIAN_EDUCATION_POINTS = {
    EducationLevel.HIGH_SCHOOL: 0,
    EducationLevel.ONE_YEAR_DIPLOMA: 15,
    EducationLevel.TWO_YEAR_DIPLOMA: 30,
    EducationLevel.BACHELORS: 30,
    EducationLevel.TWO_OR_MORE_DEGREES: 30,
    EducationLevel.MASTERS: 30,
    EducationLevel.PHD: 30,
}

FRENCH = "french"
ENGLISH = "english"
FRENCH_MIN_CLB = 7
ENGLISH_MIN_CLB = 5
FRENCH_WITH_ENGLISH_POINTS = 50
FRENCH_ONLY_POINTS = 25

# --- Language test score -> CLB conversion ---
# IELTS General Training band per skill
IELTS_TO_CLB = StepTable(
    [(4.0, 5), (5.0, 6), (6.0, 7), (6.5, 8), (7.0, 9), (8.0, 10), (9.0, 12)],
    below=4,
)
# PTE Core score per skill
PTE_TO_CLB = StepTable(
    [(36, 5), (47, 6), (55, 7), (63, 8), (75, 9), (83, 10)],
    below=4,
)
