from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileMetadata(BaseModel):
    """Summary record GitHub returns for an account."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    public_repos: int = 0
    name: Optional[str] = None
    bio: Optional[str] = None


class RepositoryRecord(BaseModel):
    """One item of the account's repository listing, kept as GitHub sent it."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    name: str
    description: Optional[str] = None
    html_url: str
    homepage: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = Field(default=0, ge=0)
    forks_count: int = Field(default=0, ge=0)
    updated_at: datetime
    topics: List[str] = Field(default_factory=list)
    fork: bool = False


class ProfileSummary(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_repos: int = Field(alias="totalRepos")
    total_stars: int = Field(ge=0, alias="totalStars")
    total_forks: int = Field(ge=0, alias="totalForks")
    top_language: str = Field(alias="topLanguage")


class LoadState(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class GitHubPanel(BaseModel):
    """Read-only view of the aggregator handed to the presentation layer."""

    model_config = ConfigDict(frozen=True)

    username: str
    state: LoadState
    summary: Optional[ProfileSummary] = None
    featured: List[RepositoryRecord] = Field(default_factory=list)


# Static page content


class ContactLink(BaseModel):
    label: str
    url: str


class SkillCategory(BaseModel):
    title: str
    skills: List[str]


class Experience(BaseModel):
    company: str
    role: str
    period: str
    achievements: List[str]


class Award(BaseModel):
    title: str
    description: str


class FeaturedProject(BaseModel):
    title: str
    description: str
    tech: List[str]
    results: str


class Leadership(BaseModel):
    organization: str
    role: Optional[str] = None
    period: Optional[str] = None
    summary: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)
    upcoming: bool = False


class Interest(BaseModel):
    title: str
    badge: str
    headline: str
    description: str
    traits: List[str]
    links: List[ContactLink] = Field(default_factory=list)


class PortfolioContent(BaseModel):
    name: str
    degree: str
    contact_links: List[ContactLink]
    professional_interests: List[str]
    awards: List[Award]
    skill_categories: List[SkillCategory]
    experiences: List[Experience]
    featured_projects: List[FeaturedProject]
    leadership: List[Leadership]
    interests: List[Interest]
    interests_reflection: str
