"""
Recipe models for the finder.

Recipe is the only entity. Every gateway maps its raw records into Recipe;
list views and the detail navigator work exclusively with these models.

# NOTE: Recipes are frozen. Sorting and filtering always build new sequences
    and never mutate records, so a captured list context stays valid for the
    whole navigation session.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Ingredient(BaseModel):
    """A single ingredient line: name plus (possibly empty) measure."""
    name: str = Field(..., min_length=1, description="Ingredient name, trimmed")
    measure: str = Field(default="", description="Measure text, trimmed (may be empty)")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.name} - {self.measure}" if self.measure else self.name


class Recipe(BaseModel):
    """
    Recipe record as exposed to the views.

    Search and list calls produce summaries (ingredients may be empty); a
    lookup by id produces the full record with flattened ingredients.
    """
    id: str = Field(..., min_length=1, description="Stable unique recipe identifier")
    name: str = Field(..., min_length=1, description="Display name")
    thumbnail_url: Optional[str] = Field(None, description="URL of the recipe thumbnail")
    category: str = Field(default="", description="Recipe category (e.g. 'Dessert')")
    area: str = Field(default="", description="Area / cuisine (e.g. 'Italian')")
    instructions: str = Field(default="", description="Newline-delimited instruction paragraphs")
    tags: Optional[str] = Field(None, description="Comma separated tag string")
    ingredients: Tuple[Ingredient, ...] = Field(default=(), description="Ordered ingredient lines")

    model_config = ConfigDict(frozen=True)

    @property
    def paragraphs(self) -> List[str]:
        """Instruction paragraphs, one per non-blank line."""
        return [line.strip() for line in self.instructions.splitlines() if line.strip()]

    @property
    def tag_list(self) -> List[str]:
        if not self.tags:
            return []
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]
