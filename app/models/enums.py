"""Enum types mirroring the closed value sets of the ``candidates`` table."""

from enum import Enum


class Platform(str, Enum):
    """Primary or additional platform a candidate publishes on."""
    tiktok = "tiktok"
    instagram = "instagram"
    youtube = "youtube"
    podcast = "podcast"
    other = "other"


class Region(str, Enum):
    """Candidate home region."""
    us = "us"
    ca = "ca"
    uk = "uk"
    au = "au"
    other = "other"


class Topic(str, Enum):
    """Content topics a candidate can speak about."""
    personal_development = "personal-development"
    relationships = "relationships"
    dating = "dating"
    wellness = "wellness"
    self_worth = "self-worth"
    confidence = "confidence"
    mindfulness = "mindfulness"
    emotional_intelligence = "emotional-intelligence"
    life_coaching = "life-coaching"
    podcasting = "podcasting"
    personal_growth = "personal-growth"
    other = "other"


class FollowerRange(str, Enum):
    """Named follower-count buckets used for filtering and reports."""
    up_to_5k = "0-5k"
    from_5k_to_10k = "5k-10k"
    from_10k_to_50k = "10k-50k"
    from_50k_to_100k = "50k-100k"
    over_100k = "100k+"


class SortOrder(str, Enum):
    """Supported orderings for candidate listings."""
    followers_desc = "followers-desc"
    followers_asc = "followers-asc"
    name_asc = "name-asc"
    name_desc = "name-desc"
    date_added = "date-added"
