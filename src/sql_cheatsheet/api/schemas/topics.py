"""Topic-related Pydantic schemas."""

from pydantic import BaseModel, Field

from sql_cheatsheet.content.models import TopicEntry


class CategoryInfo(BaseModel):
    """A category and how many topics it holds."""

    name: str
    count: int = Field(..., ge=0, description="Number of topics in the category")


class TopicInfo(BaseModel):
    """A single cheat sheet topic."""

    category: str
    title: str
    description: str
    example: str = ""
    keywords: list[str] = Field(default_factory=list, description="Lookup aliases besides the title")

    @classmethod
    def from_entry(cls, entry: TopicEntry) -> "TopicInfo":
        """Build the schema from a TopicEntry."""
        return cls(
            category=entry.category.value,
            title=entry.title,
            description=entry.description,
            example=entry.example,
            keywords=list(entry.keywords),
        )
