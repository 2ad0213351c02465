"""Pure progression rules: experience, coins, levels and achievements."""

from typing import Iterable, List

EXPERIENCE_PER_LEVEL = 1000
LEVEL_UP_BONUS_PER_LEVEL = 50
LEVEL_ACHIEVEMENTS = {
    5: 'level_5',
    10: 'level_10',
    25: 'level_25',
    50: 'level_50',
}
FIRST_GAME_ACHIEVEMENT = 'first_game'
# Largest value an Integer column holds on every supported database
MAX_INT = 2**31 - 1


def level_for_experience(experience: int) -> int:
    return experience // EXPERIENCE_PER_LEVEL + 1


def experience_for_score(score: int) -> int:
    return score // 10


def coins_for_score(score: int) -> int:
    return score // 100


def level_up_bonus(old_level: int, new_level: int) -> int:
    """Coins paid for moving from ``old_level`` to ``new_level``.

    Every level gained pays ``level * 50``, so 3 -> 6 pays (4 + 5 + 6) * 50.
    The arithmetic series is summed in closed form.
    """
    if new_level <= old_level:
        return 0
    return LEVEL_UP_BONUS_PER_LEVEL * (old_level + 1 + new_level) * (new_level - old_level) // 2


def earned_achievements(new_level: int, first_game: bool) -> List[str]:
    earned = []
    if first_game:
        earned.append(FIRST_GAME_ACHIEVEMENT)
    for threshold, tag in sorted(LEVEL_ACHIEVEMENTS.items()):
        if new_level >= threshold:
            earned.append(tag)
    return earned


def merge_achievements(current: Iterable[str], new_tags: Iterable[str]) -> List[str]:
    merged = list(current or [])
    for tag in new_tags:
        if tag not in merged:
            merged.append(tag)
    return merged
