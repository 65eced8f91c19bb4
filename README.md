# neonshooter

This package holds the game logic of a small vertical bullet-hell shooter. It has
no window and no rendering code. It covers the playfield, which is 600 × 800 and
uses screen coordinates with y pointing down. It also covers moving circles and
their collisions, pooled bullets for the player and for enemies, power-up items,
and enemy waves that end in a boss fight.

Every step function takes `dt`, the elapsed time in seconds. You can therefore
drive the simulation from any frame loop, or from a test. The classes that make
random choices accept an optional `random.Random`, so their runs can be
repeated exactly.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Modules

### `neonshooter.vector2`

`Vector2` is a mutable dataclass with the fields `x` and `y`.

- It supports `+`, `-`, multiplication by a scalar, and the in-place forms of these.
- It can be iterated, so `x, y = v` works.
- `copy()` returns a new, independent vector.
- `magnitude()` returns the length and `sqr_magnitude()` returns the squared length.
- `normalize()` scales the vector to unit length in place. A zero vector is left unchanged.
- `normalized()` returns a unit-length copy. It raises `ZeroDivisionError` for the zero vector.
- The constructors `zero()`, `one()`, `right()`, `left()`, `down()` and `up()` return fixed
  vectors. `up()` is `(0, -1)`.

### `neonshooter.circle`

This module defines the playfield constants `SCREEN_WIDTH`, `SCREEN_HEIGHT`, `FULL_ANGLE`,
`HALF_ANGLE` and `PI`.

`Circle(radius, center=None, active=True)` is the base class of every object on the
field.

- `collides_with_point(point)` accepts a `Vector2` or an `(x, y)` pair.
- `collides_with(other)` tests against another circle.

Both tests count touching as a collision. Both truncate the offsets to whole pixels
before comparing.

### `neonshooter.timer`

`Timer(clock=time.perf_counter)` measures the time between frames.

- `update()` returns the seconds since the previous call. Once at least one second
  has gathered, it sets `frame_rate` to the number of frames counted in that time.
- `report()` returns the two status lines `"FPS : <n>"` and `"ElapsedTime : <seconds>"`.

### `neonshooter.keyboard`

`Input` tracks key codes from 0 to 255 across frames.

- Call `update(pressed)` once per frame with the key codes that are held down.
- Then call `is_key_down(key)`, `is_key_up(key)` or `is_key_press(key)` for a key.
  These report a key that was just pressed, just released, or held through both frames.
- `state(key)` returns the `KeyState` itself: `NONE`, `DOWN`, `UP` or `PRESS`.

A key code outside 0–255 raises `IndexError`.

### `neonshooter.bullets`

`BulletType` lists the player's firing modes.

`Bullet` is an enemy bullet. It has its own `speed`, which defaults to 500, a `color` and a `tag`.

`PlayerBullet` is a player bullet. It moves at a fixed speed of 500.

Both classes provide `fire(...)` and `update(dt)`. A bullet that leaves the screen
becomes inactive.

`EnemyBulletPool` holds 300 enemy bullets.

- `fire(pos, direction=None, color=WHITE)` fires the first free bullet and returns it.
  It returns `None` when every bullet is in use.
- `hits(circle)` returns `True` if an active bullet touches the circle. That bullet
  becomes inactive.
- `active_bullets()` lists the bullets that are in flight.

`PlayerBulletPool(rng=None)` holds 100 player bullets. It has the same `update`, `hits`
and `active_bullets` methods as the enemy pool. It also has these firing patterns:

| Method | Bullets fired |
| --- | --- |
| `fire` | one bullet, straight up |
| `down_fire` | one bullet, straight down |
| `cross_fire` | four bullets, a quarter turn apart |
| `circle_fire` | twelve bullets, spread evenly around a full circle |
| `crazy_fire` | one bullet at a random angle in the lower half-turn |
| `shotgun_fire` | five bullets fanned across the upper half-turn |

### `neonshooter.items`

`ItemType` has four kinds of power-up: `PLAYER_SPEED`, `BULLET_SPEED`, `BULLET_POWER` and
`CHANGE_GUN`. It also has `END`, which means "no item".

`Item.spawn(position)` places an item on the field with a random kind and the colour
that belongs to that kind.

`ItemManager(rng=None)` manages a pool of 10 items.

- `update(dt)` places a free item at a random position once more than ten seconds
  have passed since the last spawn.
- `collect(player)` picks up the first active item that touches the given circle and
  returns its kind. If no item touches it, the method returns `ItemType.END`.
- `active_items()` lists the items that are on the field.

### `neonshooter.enemies`

`Enemy` is the base class. An enemy drifts down the screen and loses 10 hit points
for each player bullet that hits it. Its hit points and colour depend on the game
phase. Each subclass has its own way of firing:

- `NormalEnemy` fires one bullet at the player.
- `StrongEnemy` fires a fan of five bullets centred on the player.
- `EliteEnemy` fires a ring of ten bullets.
- `Boss` moves in two stages. First it descends to y = 300. After that it sweeps left and
  right. It picks a random attack pattern every five seconds: straight, cross, spread or
  half-circle. The longer the fight lasts, the faster it fires and the faster its
  bullets travel.

`EnemyManager(enemy_bullets, player_bullets, player=None, rng=None)` keeps 50 enemy slots.

- `update(dt)` advances the phase every 5 seconds, up to phase 3. It spawns an enemy
  every two seconds and updates every enemy.
- `current_enemy_type()` returns the `EnemyType` that the elapsed time calls for:
  - normal before 5 s
  - strong from 5 s
  - elite from 10 s
  - boss from 15 s

  Only one boss is spawned while one is still active.
- `spawn_enemy()` fills a free slot directly. It returns the new enemy, or `None`.
- `set_player(player)` sets the target for the manager and for all of its enemies.
- `collides_with(player)` returns `True` if any active enemy touches the player.
- `active_enemies()` lists the enemies that are on the field.

Enemies that aim need a player. The player can be any `Circle`. Firing without one
raises `RuntimeError`.

## Example

```python
from neonshooter.bullets import PlayerBulletPool
from neonshooter.circle import Circle
from neonshooter.vector2 import Vector2

pool = PlayerBulletPool()
pool.circle_fire(Vector2(300, 400))
pool.update(0.016)
print(len(pool.active_bullets()))   # 12

target = Circle(20)
target.center = Vector2(300, 380)
print(pool.hits(target))            # True
```

## What the package does not do

This package is not a playable game.

- It opens no window and draws nothing. Colours are kept only as RGB tuples.
- It reads no real keyboard. `Input` works only with the key codes you pass to it.
- It has no command to start a game.
- It has no player object with health, movement or a weapon, and nothing applies an
  item's effect. Use a plain `Circle` wherever a player is needed.
- It has no scene or game loop that ties the pieces together. Your own code calls the
  `update(dt)` methods and the collision checks.