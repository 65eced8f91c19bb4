"""Enemies, the boss and the manager that spawns them over time."""

from __future__ import annotations

import math
import random
from enum import Enum

from neonshooter.bullets import EnemyBulletPool, PlayerBulletPool
from neonshooter.circle import PI, SCREEN_HEIGHT, SCREEN_WIDTH, Circle
from neonshooter.vector2 import Vector2

Color = tuple[int, int, int]

RED: Color = (255, 0, 0)
NEON_BLUE: Color = (0, 255, 255)
NEON_GREEN: Color = (57, 255, 20)
NEON_PINK: Color = (255, 20, 147)
NEON_PURPLE: Color = (255, 0, 255)


class Enemy(Circle):
    """An enemy that drifts down the screen and is hurt by player bullets."""

    SPEED = 150
    DAMAGE_INTERVAL = 0.1
    FIRE_INTERVAL = 0.5
    FIRE_COUNT = 10
    RADIUS = 20
    DAMAGE = 10

    PHASE_STATS: dict[int, tuple[int, Color]] = {
        0: (30, NEON_BLUE),
        1: (50, NEON_GREEN),
        2: (80, NEON_PINK),
        3: (300, NEON_PURPLE),
    }

    def __init__(
        self,
        enemy_bullets: EnemyBulletPool,
        player_bullets: PlayerBulletPool,
        player: Circle | None = None,
    ) -> None:
        super().__init__(self.RADIUS)
        self.enemy_bullets = enemy_bullets
        self.player_bullets = player_bullets
        self.player = player
        self.hp = 0
        self.phase = 0
        self.is_damaged = False
        self.damage_timer = 0.0
        self.fire_timer = 0.0
        self.color: Color | None = None

    def _target(self) -> Vector2:
        if self.player is None:
            raise RuntimeError("enemy has no player to aim at")
        return self.player.center

    def _restore_phase_color(self) -> None:
        stats = self.PHASE_STATS.get(self.phase)
        if stats is not None:
            self.color = stats[1]

    def update(self, dt: float) -> None:
        """Move, check for hits and fire, if active."""
        if not self.active:
            return
        self.move(dt)
        self.take_damage(dt)
        self.fire(dt)

    def spawn(self, pos: Vector2) -> None:
        """Activate at pos with the hit points and colour of the current phase."""
        self.center = pos.copy()
        self.is_damaged = False
        self.active = True
        stats = self.PHASE_STATS.get(self.phase)
        if stats is not None:
            self.hp, self.color = stats

    def move(self, dt: float) -> None:
        """Drift downwards; leaving the bottom of the screen deactivates."""
        self.center.y += self.SPEED * dt
        if self.center.y > SCREEN_HEIGHT:
            self.active = False

    def take_damage(self, dt: float) -> None:
        """Recover from the last hit flash, then take a hit from a player bullet."""
        if self.is_damaged:
            self.damage_timer += dt
            if self.damage_timer >= self.DAMAGE_INTERVAL:
                self.damage_timer = 0.0
                self.is_damaged = False
                self._restore_phase_color()
        if self.player_bullets.hits(self):
            self.hp -= self.DAMAGE
            self.is_damaged = True
            self.color = RED
            if self.hp <= 0:
                self.active = False

    def fire(self, dt: float) -> None:
        """A plain enemy does not shoot."""


class NormalEnemy(Enemy):
    """Shoots a single bullet at the player."""

    def fire(self, dt: float) -> None:
        self.fire_timer += dt
        if self.fire_timer > self.FIRE_INTERVAL:
            direction = self._target() - self.center
            # A zero offset has no direction to shoot in.
            if direction.sqr_magnitude() > 0:
                self.enemy_bullets.fire(self.center, direction, NEON_BLUE)
            self.fire_timer = 0.0


class StrongEnemy(Enemy):
    """Shoots a narrow fan of bullets centred on the player."""

    def fire(self, dt: float) -> None:
        to_player = self._target() - self.center
        base_angle = math.atan2(to_player.y, to_player.x)
        half_count = self.FIRE_COUNT // 2
        step = PI * 2.0 / self.FIRE_COUNT
        self.fire_timer += dt
        if self.fire_timer > self.FIRE_INTERVAL:
            for i in range(half_count):
                angle = base_angle + step * (i - (half_count - 1) / 2.0)
                self.enemy_bullets.fire(
                    self.center, Vector2(math.cos(angle), math.sin(angle)), NEON_GREEN
                )
            self.fire_timer = 0.0


class EliteEnemy(Enemy):
    """Shoots a ring of bullets in every direction."""

    def fire(self, dt: float) -> None:
        step = PI * 2.0 / self.FIRE_COUNT
        self.fire_timer += dt
        if self.fire_timer > self.FIRE_INTERVAL:
            for i in range(self.FIRE_COUNT):
                angle = step * i
                self.enemy_bullets.fire(
                    self.center, Vector2(math.cos(angle), math.sin(angle)), NEON_PINK
                )
            self.fire_timer = 0.0


_BOSS_DIRECTIONS = [
    Vector2(0, 1), Vector2(1, 0), Vector2(0, -1), Vector2(-1, 0),
    Vector2(1, 1), Vector2(-1, 1), Vector2(-1, -1), Vector2(1, -1),
]


class Boss(Enemy):
    """A large enemy that descends, sweeps sideways and switches attack patterns."""

    class Pattern(Enum):
        STRAIGHT = 0
        CROSS = 1
        SPREAD = 2
        HALF_CIRCLE = 3

    SPEED = 300
    BOSS_RADIUS = 60
    MIN_FIRE_INTERVAL = 0.1
    PATTERN_TIME = 5.0
    # Screen edges are judged with the ordinary enemy size, not the boss radius.
    EDGE_MARGIN = Enemy.RADIUS

    _PATTERN_ORDER = [Pattern.CROSS, Pattern.SPREAD, Pattern.STRAIGHT, Pattern.HALF_CIRCLE]

    def __init__(
        self,
        enemy_bullets: EnemyBulletPool,
        player_bullets: PlayerBulletPool,
        player: Circle | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(enemy_bullets, player_bullets, player)
        self.radius = self.BOSS_RADIUS
        self._rng = rng if rng is not None else random.Random()
        self.attack_timer = 0.0
        self.bullet_timer = 0.0
        self.target_y = 300.0
        self.x_direction = 1.0
        self.x_speed = 150.0
        self.bullet_speed = 500.0
        self.reached_y = False
        self.pattern = Boss.Pattern.STRAIGHT

    def _shoot(self, direction: Vector2, color: Color) -> None:
        bullet = self.enemy_bullets.fire(self.center, direction, color)
        if bullet is not None:
            bullet.speed = self.bullet_speed

    def fire(self, dt: float) -> None:
        """Fire according to the current pattern, faster the longer the fight lasts."""
        fire_interval = max(
            self.MIN_FIRE_INTERVAL, self.FIRE_INTERVAL - self.attack_timer * 0.01
        )
        step = PI * 2.0 / self.FIRE_COUNT
        self.fire_timer += dt
        self.attack_timer += dt
        self.bullet_speed = self.SPEED + self.attack_timer * 5.0
        if self.fire_timer <= fire_interval:
            return

        if self.pattern is Boss.Pattern.STRAIGHT:
            direction = self._target() - self.center
            if direction.sqr_magnitude() > 0:
                self._shoot(direction, NEON_BLUE)
            self.fire_timer = 0.0
        elif self.pattern is Boss.Pattern.CROSS:
            for direction in _BOSS_DIRECTIONS:
                self._shoot(direction, NEON_GREEN)
            self.fire_timer = 0.0
        elif self.pattern is Boss.Pattern.SPREAD:
            for i in range(self.FIRE_COUNT * 2):
                angle = step * i / 2
                self._shoot(Vector2(math.cos(angle), math.sin(angle)), NEON_PINK)
            self.fire_timer = 0.0
        elif self.pattern is Boss.Pattern.HALF_CIRCLE:
            to_player = self._target() - self.center
            base_angle = math.atan2(to_player.y, to_player.x)
            half_count = self.FIRE_COUNT // 2
            half_step = PI / (self.FIRE_COUNT * 1.5)
            self.fire_timer += dt
            if self.fire_timer > self.FIRE_INTERVAL:
                for i in range(half_count):
                    angle = base_angle + half_step * (i - (half_count - 1) / 2.0)
                    self._shoot(Vector2(math.cos(angle), math.sin(angle)), NEON_GREEN)
                self.fire_timer = 0.0

    def move(self, dt: float) -> None:
        """Descend to the target height, then sweep left and right."""
        margin = self.EDGE_MARGIN
        if not self.reached_y:
            self.center.y += self.SPEED * dt
            if self.center.y >= self.target_y:
                self.center.y = self.target_y
                self.reached_y = True
        else:
            self.center.x += self.x_direction * self.x_speed * dt
            if self.center.x <= margin:
                self.center.x = margin
                self.x_direction *= -1.0
            elif self.center.x >= SCREEN_WIDTH - margin:
                self.center.x = SCREEN_WIDTH - margin
                self.x_direction *= -1.0

        if self.center.x < -margin or self.center.x > SCREEN_WIDTH + margin:
            self.active = False

    def change_pattern(self, dt: float) -> None:
        """Pick a random attack pattern every few seconds."""
        self.bullet_timer += dt
        if self.bullet_timer > self.PATTERN_TIME:
            self.bullet_timer = 0.0
            self.pattern = self._PATTERN_ORDER[self._rng.randrange(len(self._PATTERN_ORDER))]

    def update(self, dt: float) -> None:
        self.move(dt)
        self.fire(dt)
        self.change_pattern(dt)
        self.take_damage(dt)


class EnemyType(Enum):
    NORMAL = 0
    STRONG = 1
    ELITE = 2
    BOSS = 3


class EnemyManager:
    """Keeps a fixed set of enemy slots and fills them as the game goes on."""

    POOL_SIZE = 50
    SPAWN_INTERVAL = 2.0

    def __init__(
        self,
        enemy_bullets: EnemyBulletPool,
        player_bullets: PlayerBulletPool,
        player: Circle | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.enemy_bullets = enemy_bullets
        self.player_bullets = player_bullets
        self.player = player
        self._rng = rng if rng is not None else random.Random()
        self.game_timer = 0.0
        self.phase_timer = 0.0
        self._spawn_timer = 0.0
        self.phase = 0
        self.enemies: list[Enemy] = []
        for _ in range(self.POOL_SIZE):
            enemy = NormalEnemy(enemy_bullets, player_bullets, player)
            enemy.active = False
            self.enemies.append(enemy)

    def update(self, dt: float) -> None:
        """Advance the clocks, spawn on schedule and update every enemy."""
        self.game_timer += dt
        self._spawn_timer += dt
        self.phase_timer += dt
        if self.phase_timer >= 15.0:
            self.phase = 3
        elif self.phase_timer >= 10.0:
            self.phase = 2
        elif self.phase_timer >= 5.0:
            self.phase = 1
        else:
            self.phase = 0

        if self._spawn_timer > self.SPAWN_INTERVAL:
            self._spawn_timer = 0.0
            self.spawn_enemy()

        for enemy in self.enemies:
            enemy.phase = self.phase
            enemy.update(dt)

    def current_enemy_type(self) -> EnemyType:
        """The kind of enemy that the elapsed game time calls for."""
        if self.game_timer >= 15.0:
            return EnemyType.BOSS
        if self.game_timer >= 10.0:
            return EnemyType.ELITE
        if self.game_timer >= 5.0:
            return EnemyType.STRONG
        return EnemyType.NORMAL

    def _create(self, kind: EnemyType) -> Enemy:
        if kind is EnemyType.BOSS:
            return Boss(self.enemy_bullets, self.player_bullets, self.player, self._rng)
        cls = {
            EnemyType.NORMAL: NormalEnemy,
            EnemyType.STRONG: StrongEnemy,
            EnemyType.ELITE: EliteEnemy,
        }[kind]
        return cls(self.enemy_bullets, self.player_bullets, self.player)

    def spawn_enemy(self) -> Enemy | None:
        """Fill the first free slot at the top of the screen.

        Returns the new enemy, or None when no slot is free or a boss is
        already on screen.
        """
        for index, slot in enumerate(self.enemies):
            if slot.active:
                continue
            kind = self.current_enemy_type()
            if kind is EnemyType.BOSS and any(
                isinstance(enemy, Boss) and enemy.active for enemy in self.enemies
            ):
                return None
            enemy = self._create(kind)
            enemy.player = self.player
            enemy.phase = self.phase
            enemy.spawn(Vector2(float(self._rng.randrange(SCREEN_WIDTH)), 0.0))
            self.enemies[index] = enemy
            return enemy
        return None

    def set_player(self, player: Circle) -> None:
        """Give the manager and every enemy the player to aim at."""
        self.player = player
        for enemy in self.enemies:
            enemy.player = player

    def collides_with(self, player: Circle) -> bool:
        """True if any active enemy touches the player."""
        return any(
            enemy.active and enemy.collides_with(player) for enemy in self.enemies
        )

    def active_enemies(self) -> list[Enemy]:
        return [enemy for enemy in self.enemies if enemy.active]