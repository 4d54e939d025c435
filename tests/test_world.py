import pytest

from lucaria.world import Scene, World


class Counter:
    def __init__(self, start=0, step=1):
        self.value = start
        self.step = step

    def update(self):
        self.value += self.step


class Other:
    def update(self):
        raise AssertionError("should not be updated")


def test_make_actor_passes_arguments():
    scene = Scene()
    actor = scene.make_actor(Counter, 5, step=2)
    assert actor.value == 5
    assert actor.step == 2


def test_each_actor_visits_only_given_type():
    scene = Scene()
    a = scene.make_actor(Counter)
    b = scene.make_actor(Counter)
    scene.make_actor(Other)
    seen = []
    scene.each_actor(Counter, seen.append)
    assert seen == [a, b]


def test_update_actors_updates_each_actor_of_type():
    scene = Scene()
    a = scene.make_actor(Counter, 0, step=3)
    b = scene.make_actor(Counter, 1)
    scene.make_actor(Other)
    scene.update_actors(Counter)
    assert (a.value, b.value) == (3, 2)


def test_destroy_actor_removes_by_identity():
    scene = Scene()
    a = scene.make_actor(Counter)
    b = scene.make_actor(Counter)
    scene.destroy_actor(a)
    seen = []
    scene.each_actor(Counter, seen.append)
    assert seen == [b]


def test_destroy_unknown_actor_is_ignored():
    scene = Scene()
    a = scene.make_actor(Counter)
    scene.destroy_actor(Counter())
    seen = []
    scene.each_actor(Counter, seen.append)
    assert seen == [a]


class MenuScene:
    def __init__(self, scene):
        self.scene = scene


class GameScene:
    def __init__(self, scene):
        self.scene = scene


def test_make_scene_builds_object_on_scene():
    world = World()
    menu = world.make_scene(MenuScene)
    game = world.make_scene(GameScene)
    visited = []
    world.each_scene(visited.append)
    assert visited == [menu.scene, game.scene]


def test_make_scene_twice_of_same_type_raises():
    world = World()
    world.make_scene(MenuScene)
    with pytest.raises(ValueError):
        world.make_scene(MenuScene)
    visited = []
    world.each_scene(visited.append)
    assert len(visited) == 1


def test_scene_actors_are_reachable_through_world():
    world = World()
    game = world.make_scene(GameScene)
    actor = game.scene.make_actor(Counter)
    world.each_scene(lambda scene: scene.update_actors(Counter))
    assert actor.value == 1