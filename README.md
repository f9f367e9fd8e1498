# gametemplate

Building blocks for small 2D games, written in plain Python with no
third-party dependencies.

## What is inside

- `gametemplate.vector`: `Vector2D`, an immutable vector with component-wise
  arithmetic (with another vector or a scalar), `length`, `distance`,
  `normalized`, `dot`, `clamp` and `rotated` (angles in degrees, screen
  coordinates with y pointing down). `Vector2D.ZERO`, `UP`, `DOWN`, `LEFT` and
  `RIGHT` are predefined.
- `gametemplate.transform`: `Transform`, a parent/child hierarchy that keeps
  world and relative position, rotation and scale in step, plus a pivot.
- `gametemplate.timer`: `Timer`, which derives `delta_time` and `fps` (averaged
  over 60 frames) from a clock function; by default `time.perf_counter`.
- `gametemplate.refcount`: `RefCounted`, a base class whose `release` is called
  when its count drops to zero, and `SharedRef`, a handle holding one reference
  that can also be used as a context manager.
- `gametemplate.memory_pool`: `ObjectPool`, which reuses slots lowest index
  first and grows in fixed-size blocks, and `PoolManager`, which keeps one pool
  per class.
- `gametemplate.input`: `KeyState`, `InputState`, `Binder` and `Input`. `Input`
  tracks press/hold/release of registered keys and mouse buttons from the sets
  of inputs you pass to `update`, and calls functions bound to named
  combinations.
- `gametemplate.entity`: `Entity` and `Component`, a tree of named components
  with `update`, `late_update` and `render` passes, lookup by name or type, and
  enable/disable/destroy that spread through the subtree.
- `gametemplate.collision`: `Channel`, `Interaction`, `CollisionProfile`,
  `CollisionProfiles`, `ColliderPair`, `Rect`, `Circle`, and the hit tests
  `aabb_hit`, `circle_circle_hit`, `aabb_circle_hit`, `rect_contains_point` and
  `circle_contains_point`.
- `gametemplate.colliders`: `BoxCollider` and `CircleCollider` components with
  enter/stay/exit callbacks, and `circle_outline` for the pixel points of a
  circle.
- `gametemplate.game_object`: `GameObject`, a container rooted in a component
  tree whose root transform is the object's transform.
- `gametemplate.movement`: `MovementComponent`, which moves its object in the
  directions requested each frame.
- `gametemplate.rigidbody`: `Rigidbody` with gravity, forces, impulses and
  linear drag.
- `gametemplate.physics`: `resolve_overlap` pushes overlapping box and circle
  colliders apart along the minimum translation vector; `move_by` shifts a
  collider's object.
- `gametemplate.paths`: `PathRegistry`, named resource directories (texture,
  data, font, sound) built on a base path.
- `gametemplate.assets`: `FrameRect`, `AnimationType`, `AnimationState`,
  `AnimationData`, `SpriteFrames`, `UIFrames` and `AnimationLibrary`.
- `gametemplate.data`: CSV loaders `load_frame_data`, `load_animation_data`,
  `load_widget_data` and `load_all` (which reads `Entity/Frame.csv`,
  `Entity/Animation.csv` and `Widget/Widget.csv` below a data directory, logs
  and returns the files it could not open, and raises `DataFormatError` for a
  malformed row).

## Installing

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## A short example

```python
from gametemplate.vector import Vector2D
from gametemplate.transform import Transform

parent = Transform()
child = Transform()
parent.add_child(child)

parent.set_world_pos(Vector2D(100.0, 50.0))
child.set_relative_pos(Vector2D(10.0, 0.0))
print(child.world_pos)   # Vector2D(x=110.0, y=50.0)
```

```python
from gametemplate.collision import Channel, Interaction, CollisionProfiles

profiles = CollisionProfiles()
profiles.register_defaults()
player = profiles.find_profile("Player")
print(player.responses[Channel.BULLET] is Interaction.IGNORE)   # True
```

## What it does not do

The package is a library of parts, not a running game. It opens no window,
reads no keyboard or mouse devices (you pass the pressed inputs to
`Input.update`), draws nothing (the `renderer` argument of the render passes is
only handed down the component tree), and loads no textures, fonts or sounds.
There are no scenes, layers, cameras, widgets or sprite animation playback, and
no command to start.