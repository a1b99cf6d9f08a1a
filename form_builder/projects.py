from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, MutableMapping, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger("form_builder.projects")

PROJECT_KEY_PREFIX = "project:"
CURRENT_KEY = "current"


def _now_ms() -> int:
    return int(time.time() * 1000)


class CurrentProject(BaseModel):
    """Work in progress: the three editor texts, stored verbatim."""

    json_schema: str
    ui_schema: str
    data: str
    last_modified: int = Field(default_factory=_now_ms)


class Project(CurrentProject):
    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str


def create_project(name: str, json_schema: str, ui_schema: str, data: str) -> Project:
    return Project(name=name, json_schema=json_schema, ui_schema=ui_schema, data=data)


def create_current_project(json_schema: str, ui_schema: str, data: str) -> CurrentProject:
    return CurrentProject(json_schema=json_schema, ui_schema=ui_schema, data=data)


class ProjectRepository:
    """Saved projects kept in a caller-supplied key/value store.

    The store only needs mapping semantics (a dict, or a per-session dict
    held in Gradio state). Namespacing it is up to the caller.
    """

    def __init__(self, storage: Optional[MutableMapping[str, Dict[str, Any]]] = None):
        self.storage = storage if storage is not None else {}

    @staticmethod
    def _project_key(project_id: str) -> str:
        return f"{PROJECT_KEY_PREFIX}{project_id}"

    def save_project(self, project: Project) -> None:
        self.storage[self._project_key(project.id)] = project.model_dump()

    def get_project(self, project_id: str) -> Optional[Project]:
        raw = self.storage.get(self._project_key(project_id))
        if raw is None:
            return None
        try:
            return Project.model_validate(raw)
        except ValidationError:
            logger.warning("Ignoring unreadable project entry %s", project_id)
            return None

    def delete_project(self, project_id: str) -> None:
        self.storage.pop(self._project_key(project_id), None)

    def get_all_projects(self) -> List[Project]:
        """All readable projects, most recently modified first."""
        projects: List[Project] = []
        for key in list(self.storage.keys()):
            if not key.startswith(PROJECT_KEY_PREFIX):
                continue
            project = self.get_project(key[len(PROJECT_KEY_PREFIX):])
            if project is not None:
                projects.append(project)

        projects.sort(key=lambda p: p.last_modified, reverse=True)
        return projects

    def search_projects(self, query: Optional[str]) -> List[Project]:
        projects = self.get_all_projects()
        if not query or not query.strip():
            return projects

        needle = query.lower()
        return [p for p in projects if needle in p.name.lower()]

    def save_current(self, json_schema: str, ui_schema: str, data: str) -> None:
        self.storage[CURRENT_KEY] = create_current_project(json_schema, ui_schema, data).model_dump()

    def get_current(self) -> Optional[CurrentProject]:
        raw = self.storage.get(CURRENT_KEY)
        if raw is None:
            return None
        try:
            return CurrentProject.model_validate(raw)
        except ValidationError:
            logger.warning("Ignoring unreadable work-in-progress entry")
            return None
