import random
from datetime import datetime, timedelta
from typing import List
from uuid import uuid4

from pydantic import BaseModel, Field, TypeAdapter, field_validator

ADJECTIVES = [
    "Swift", "Brave", "Clever", "Happy", "Lucky", "Mighty",
    "Quick", "Silent", "Fierce", "Gentle", "Bold", "Wise",
    "Agile", "Cosmic", "Electric", "Mystic", "Noble", "Rapid",
    "Stealth", "Turbo", "Ultra", "Vivid", "Wild", "Epic",
    "Mega", "Super", "Hyper", "Cyber", "Neon", "Pixel",
]
ANIMALS = [
    "Panda", "Eagle", "Fox", "Tiger", "Wolf", "Bear",
    "Hawk", "Shark", "Dragon", "Phoenix", "Falcon", "Lion",
    "Cobra", "Viper", "Raven", "Owl", "Cat", "Dog",
    "Monkey", "Rabbit", "Turtle", "Dolphin", "Octopus", "Squid",
    "Mantis", "Spider", "Scorpion", "Rhino", "Hippo", "Giraffe",
]


class LeaderboardEntry(BaseModel):
    """One completed game eligible for ranking.

    Attribute names are snake_case, the stored JSON uses the camelCase aliases.
    """

    player_id: str = Field(alias="playerId")
    nickname: str
    score: int = Field(ge=0)
    recorded_at: datetime = Field(alias="recordedAt")
    level: int = Field(ge=0)
    lines_cleared: int = Field(ge=0, alias="linesCleared")
    session_duration: timedelta = Field(alias="sessionDuration")

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("session_duration")
    @classmethod
    def check_duration(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("session_duration must not be negative")
        return value


# Serialized form of the ranked collection stored under one key
LeaderboardAdapter = TypeAdapter(List[LeaderboardEntry])


class GameSessionResult(BaseModel):
    score: int = Field(ge=0)
    level: int = Field(ge=0)
    lines_cleared: int = Field(ge=0)
    duration: timedelta

    class Config:
        frozen = True

    @field_validator("duration")
    @classmethod
    def check_duration(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("duration must not be negative")
        return value


class PlayerProfile(BaseModel):
    id: str
    nickname: str

    class Config:
        frozen = True

    @classmethod
    def generate_new(cls) -> "PlayerProfile":
        """Create a profile with a fresh uuid4 id and a nickname like "SwiftPanda"."""
        nickname = random.choice(ADJECTIVES) + random.choice(ANIMALS)
        return cls(id=str(uuid4()), nickname=nickname)


class LeaderboardRow(BaseModel):
    rank: int
    entry: LeaderboardEntry
    is_current_player: bool = False
