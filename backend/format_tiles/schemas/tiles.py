from pydantic import BaseModel, Field


class ModalAllowListRead(BaseModel):
    resources: list[str]
    modules: list[str]


class ModuleContentRead(BaseModel):
    id: int
    html: str


class SessionWidthUpdate(BaseModel):
    width: int = Field(ge=0, le=20000)


class SessionWidthStatus(BaseModel):
    status: bool


class TileColourRead(BaseModel):
    courseid: int
    colour: str


class ResourceIconRead(BaseModel):
    modulecontextid: int
    icon: str | None


class JsNavPreferenceUpdate(BaseModel):
    enabled: bool


class JsNavPreferenceStatus(BaseModel):
    usingjsnav: bool


class ReleaseRead(BaseModel):
    moodle: float
    tiles: float
