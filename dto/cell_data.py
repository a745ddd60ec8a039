from pydantic import AfterValidator, BaseModel, ConfigDict
from typing import Annotated, Literal, Optional

from utils.rich_text import normalize_rich_text

CellTag = Literal["td", "th"]
CellAlign = Literal["left", "center", "right"]

# Rich-text markup, stored in canonical form (see utils.rich_text)
RichText = Annotated[str, AfterValidator(normalize_rich_text)]


class CellData(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: RichText = ""  # opaque to the table model
    tag: CellTag = "td"
    scope: Optional[str] = None  # only rendered for th cells
    align: Optional[CellAlign] = None  # column-level, stored per cell
