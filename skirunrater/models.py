import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Characters the data file cannot hold: anything outside XML 1.0's Char
# production, plus \r, which XML parsers normalize to \n on read.
UNSTORABLE_CHARS = re.compile(
    "[^\t\n\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)

# --- Record Type ---

class SkiRun(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="ID")
    name: str = Field(alias="Name")
    vertical: int = Field(alias="Vertical")  # vertical drop in feet

    @field_validator("name")
    @classmethod
    def name_is_storable(cls, v: str) -> str:
        check_storable(v)
        return v

# Element order written to the data file
XML_FIELDS = ("ID", "Name", "Vertical")


def check_storable(text: str) -> None:
    bad = UNSTORABLE_CHARS.search(text)
    if bad:
        raise ValueError(f"character {bad.group()!r} cannot be stored in the data file")
