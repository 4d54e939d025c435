"""Scenes holding actors, and the world that holds the scenes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

A = TypeVar("A")
S = TypeVar("S")


class Scene:
    """A container of actors grouped by their type, plus free components."""

    def __init__(self) -> None:
        self.components: dict[Any, Any] = {}
        self._actors: dict[type, list[Any]] = {}

    def make_actor(self, actor_type: type[A], *args: Any, **kwargs: Any) -> A:
        """Create an actor of ``actor_type`` in this scene and return it."""
        actor = actor_type(*args, **kwargs)
        self._actors.setdefault(actor_type, []).append(actor)
        return actor

    def destroy_actor(self, actor: Any) -> None:
        """Remove ``actor`` from the scene; unknown actors are ignored."""
        actors = self._actors.get(type(actor), [])
        for index, existing in enumerate(actors):
            if existing is actor:
                del actors[index]
                return

    def each_actor(self, actor_type: type[A], callback: Callable[[A], None]) -> None:
        """Call ``callback`` with every actor of ``actor_type``."""
        for actor in list(self._actors.get(actor_type, [])):
            callback(actor)

    def update_actors(self, actor_type: type) -> None:
        """Call ``update()`` on every actor of ``actor_type``."""
        self.each_actor(actor_type, lambda actor: actor.update())


class World:
    """Holds one scene per scene type."""

    def __init__(self) -> None:
        self._scenes: list[Scene] = []
        self._data: list[Any] = []
        self._types: set[type] = set()

    def make_scene(self, scene_type: Callable[[Scene], S]) -> S:
        """Create a scene and build a ``scene_type`` object on it.

        Raises ValueError if a scene of that type already exists.
        """
        if scene_type in self._types:
            raise ValueError("only one scene of each type")
        scene = Scene()
        self._scenes.append(scene)
        instance = scene_type(scene)
        self._data.append(instance)
        self._types.add(scene_type)
        logger.info("scene created")
        return instance

    def each_scene(self, callback: Callable[[Scene], None]) -> None:
        """Call ``callback`` with every scene in creation order."""
        for scene in self._scenes:
            callback(scene)