"""Fallback strings shown when a section has no stored value."""
from __future__ import annotations

from typing import Dict

DEFAULT_HERO_IMAGE = "https://images.unsplash.com/photo-1544367567-0f2fcb009e0b?w=600&h=600&fit=crop&crop=faces"

DEFAULT_CONTENT: Dict[str, Dict[str, str]] = {
    "header": {
        "nav_home": "Home",
        "nav_about": "About",
        "nav_services": "Services",
        "nav_experience": "Experience",
        "nav_gallery": "Gallery",
        "nav_contact": "Contact",
        "cta_text": "Book a Session",
    },
    "hero": {
        "image": DEFAULT_HERO_IMAGE,
        "badge_text": "District Co-Ordinator, Gujarat State Yog Board",
        "title": "Empowering Health, Discipline & Awareness Through Yoga",
        "subtitle": (
            "Practical yoga sessions, meditation workshops, and motivational talks for colleges, "
            "hospitals, government institutions, and corporate offices across Gujarat."
        ),
        "cta_primary": "Book a Session",
        "cta_secondary": "View Programs",
    },
    "stats": {
        "sessions_count": "100+",
        "sessions_label": "Sessions Conducted",
        "participants_count": "5000+",
        "participants_label": "Participants Trained",
        "institutions_count": "20+",
        "institutions_label": "Institutions Served",
    },
    "about": {
        "badge": "About Me",
        "title": "Spreading Practical & Scientific Yoga",
        "description_1": (
            "As the District Co-Ordinator at Gujarat State Yog Board, I am dedicated to spreading the "
            "benefits of yoga through practical, scientific, and motivational sessions."
        ),
        "description_2": (
            "My mission is to make yoga accessible and impactful for everyone, from students and "
            "healthcare professionals to corporate teams and government employees. I focus on real-world "
            "applications of yoga for stress management, physical health, and mental clarity."
        ),
        "card_title": "Govt. Certified",
        "card_subtitle": "Gujarat State Yog Board",
        "highlight_1_title": "Government Role",
        "highlight_1_desc": "District Co-Ordinator at Gujarat State Yog Board (Govt. of Gujarat)",
        "highlight_2_title": "Certified Training",
        "highlight_2_desc": "100-Hour Yoga Training from Gujarat State Yog Board",
        "highlight_3_title": "Diverse Audience",
        "highlight_3_desc": "Students, medical professionals, corporate teams, and government staff",
        "highlight_4_title": "Practical Focus",
        "highlight_4_desc": "Scientific, practical, and result-oriented yoga education",
    },
    "gallery": {
        "badge": "Gallery",
        "title": "Glimpses of Our Yoga Sessions",
        "description": "Moments captured from workshops, training sessions, and yoga events across Gujarat.",
    },
    "contact": {
        "phone": "+91 99744 54516",
        "email": "Durgeshh.yoga@gmail.com",
        "instagram": "@Durgesh.yoga",
        "location": "Gujarat, India",
    },
}


def defaults_for(section_key: str) -> Dict[str, str]:
    return dict(DEFAULT_CONTENT.get(section_key, {}))
