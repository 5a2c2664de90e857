"""Collision passes run once per tick after movement and buff expiry."""

import random

from .config import ENEMY_BURST, ENEMY_PALETTE, PLAYER_BURST, PLAYER_PALETTE
from .entities import Particle, intersects


def spawn_explosion(particles, x, y, is_player=False, rng=random):
    count = PLAYER_BURST if is_player else ENEMY_BURST
    palette = PLAYER_PALETTE if is_player else ENEMY_PALETTE
    for _ in range(count):
        particles.append(Particle(
            x, y,
            rng.uniform(2, 6),
            rng.uniform(-3, 3),
            rng.uniform(-3, 3),
            rng.choice(palette),
            rng.randrange(20, 50),
        ))
    return count


def resolve_bullet_hits(session):
    """Each bullet damages at most the first enemy it overlaps."""
    killed = 0
    for bullet in list(session.bullets):
        for enemy in session.enemies:
            if not intersects(bullet, enemy):
                continue
            enemy.health -= 1
            spawn_explosion(session.particles, *enemy.center, rng=session.rng)
            session.sound.play("explosion")
            session.bullets.remove(bullet)
            if enemy.health <= 0:
                session.add_score(enemy.score_value)
                session.enemies.remove(enemy)
                killed += 1
            break
    return killed


def resolve_player_hits(session) -> bool:
    """Returns False when the player was destroyed."""
    player = session.player
    for enemy in list(session.enemies):
        if not intersects(player, enemy):
            continue
        if player.shield_active:
            spawn_explosion(session.particles, *enemy.center, rng=session.rng)
            session.sound.play("explosion")
            session.enemies.remove(enemy)
            session.buffs.break_shield()
        else:
            spawn_explosion(session.particles, *player.center, is_player=True, rng=session.rng)
            session.sound.play("explosion")
            session.end_game()
            return False
    return True


def resolve_pickups(session, now):
    collected = []
    for prop in list(session.props):
        if intersects(session.player, prop):
            session.buffs.apply(prop.effect, now)
            session.props.remove(prop)
            session.sound.play("collect")
            collected.append(prop.effect)
    return collected


def resolve_collisions(session, now) -> bool:
    resolve_bullet_hits(session)
    if not resolve_player_hits(session):
        return False
    resolve_pickups(session, now)
    return True
