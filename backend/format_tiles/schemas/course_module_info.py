from pydantic import BaseModel, ConfigDict


class CourseModuleInfoRead(BaseModel):
    id: int
    courseid: int
    modulecontextid: int
    coursecontextid: int
    name: str
    modname: str
    sectionnumber: int
    sectionid: int
    completionenabled: bool
    completionstate: int | None
    iscomplete: bool
    ismanualcompletion: bool
    resourcetype: str | None
    pluginfileurl: str
    modalallowed: bool

    model_config = ConfigDict(from_attributes=True)
