from pydantic import BaseModel

from ..models import Category, EntryType, Subcategory


class SubcategoryInput(BaseModel):
    id: str
    name: str

    def to_model(self) -> Subcategory:
        return Subcategory(id=self.id, name=self.name)


class CategoryInput(BaseModel):
    """Category as held by the caller, subcategories in display order."""
    id: str
    name: str
    type: EntryType
    color: str | None = None
    subcategories: list[SubcategoryInput] = []

    def to_model(self) -> Category:
        return Category(
            id=self.id,
            name=self.name,
            type=self.type,
            color=self.color,
            subcategories=tuple(s.to_model() for s in self.subcategories),
        )
