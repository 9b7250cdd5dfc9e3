"""
Static course catalog shown on the courses page.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class Course:
    title: str
    description: str
    duration: str
    level: str
    students: str
    rating: str
    features: Tuple[str, ...] = field(default_factory=tuple)


COURSES: Tuple[Course, ...] = (
    Course(
        title="Quran & Tajweed for Beginners",
        description=(
            "Perfect for adults and children just starting their journey with the Quran. "
            "Learn basic Arabic letters, pronunciation, and fundamental Tajweed rules."
        ),
        duration="3-6 months",
        level="Beginner",
        students="200+",
        rating="4.9",
        features=("Arabic Alphabet", "Basic Tajweed", "Simple Surahs", "Prayer Duas"),
    ),
    Course(
        title="Quran Memorization (Hifz)",
        description=(
            "Achieve your dream of becoming a Hafiz or Hafiza with our structured memorization "
            "program. Systematic approach with regular revision."
        ),
        duration="2-4 years",
        level="All Levels",
        students="150+",
        rating="4.8",
        features=("Structured Program", "Daily Revision", "Progress Tracking"),
    ),
    Course(
        title="Nazra & Quran Recitation",
        description=(
            "Improve your fluency and pronunciation with daily practice. "
            "Focus on beautiful recitation and advanced Tajweed rules."
        ),
        duration="6-8 months",
        level="Intermediate",
        students="300+",
        rating="4.9",
        features=("Fluent Reading", "Advanced Tajweed", "Beautiful Recitation", "Qira'at Styles"),
    ),
    Course(
        title="Tajweed Mastery",
        description=(
            "Deep dive into the rules of Tajweed with expert instructors. "
            "Perfect for those who want to perfect their recitation."
        ),
        duration="6-12 months",
        level="Intermediate to Advanced",
        students="180+",
        rating="4.9",
        features=("Advanced Rules", "Practical Application", "Individual Feedback", "Certification"),
    ),
    Course(
        title="Quranic Arabic",
        description=(
            "Understand the language of the Quran. Learn Arabic grammar, vocabulary, "
            "and sentence structure directly from the Quranic text."
        ),
        duration="1-2 years",
        level="All Levels",
        students="220+",
        rating="4.7",
        features=("Grammar", "Vocabulary", "Sentence Structure", "Quranic Context"),
    ),
    Course(
        title="Tafseer & Reflection",
        description=(
            "Deepen your understanding of the Quran through comprehensive Tafseer "
            "and practical applications in daily life."
        ),
        duration="1 year",
        level="Intermediate to Advanced",
        students="160+",
        rating="4.8",
        features=("Quranic Themes", "Contextual Understanding", "Practical Applications"),
    ),
    Course(
        title="Islamic Studies for Kids",
        description=(
            "Engaging and interactive Islamic education for children, covering Aqeedah, "
            "Fiqh, Seerah, and Islamic manners."
        ),
        duration="Ongoing",
        level="Children",
        students="250+",
        rating="4.9",
        features=("Aqeedah", "Fiqh", "Seerah", "Islamic Manners"),
    ),
    Course(
        title="Quranic Calligraphy",
        description=(
            "Learn the beautiful art of Arabic calligraphy with a focus on Quranic verses "
            "and Islamic art."
        ),
        duration="6 months",
        level="All Levels",
        students="120+",
        rating="4.7",
        features=("Naskh Script", "Thuluth Script", "Composition", "Islamic Art"),
    ),
)


def list_courses() -> List[Course]:
    return list(COURSES)
