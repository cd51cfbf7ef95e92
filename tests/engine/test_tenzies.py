"""
Tenzies - Engine Tests

Tests for TenziesEngine transitions: roll, hold, reset, tick and win
detection.
"""

import random

import pytest

from src.engine.base import BestScore, GamePhase, GameState
from src.engine.tenzies import TenziesEngine


# === Generate / New Game ===


class TestNewGame:
    """Tests for TenziesEngine.generate_dice() and new_game()."""

    def test_ten_dice(self):
        assert len(TenziesEngine.generate_dice()) == 10

    def test_values_in_range(self):
        for _ in range(50):
            for die in TenziesEngine.generate_dice():
                assert 1 <= die.value <= 6

    def test_none_held(self):
        assert not any(d.is_held for d in TenziesEngine.generate_dice())

    def test_unique_ids(self):
        dice = TenziesEngine.generate_dice()
        assert len({d.id for d in dice}) == 10

    def test_new_game_is_idle(self):
        state = TenziesEngine.new_game()
        assert state.roll_count == 0
        assert state.elapsed_seconds == 0
        assert state.phase is GamePhase.IDLE

    def test_seeded_rng_is_reproducible(self):
        a = TenziesEngine.new_game(random.Random(7))
        b = TenziesEngine.new_game(random.Random(7))
        assert a.values == b.values

    def test_uses_injected_rng(self, make_rng):
        state = TenziesEngine.new_game(make_rng(2))
        assert state.values == (2,) * 10


# === Roll ===


class TestRoll:
    """Tests for TenziesEngine.roll()."""

    def test_increments_roll_count(self, mixed_state):
        assert TenziesEngine.roll(mixed_state).roll_count == 4

    def test_held_dice_unchanged(self, mixed_state, make_rng):
        new_state = TenziesEngine.roll(mixed_state, make_rng(6))
        for before, after in zip(mixed_state.dice, new_state.dice):
            if before.is_held:
                assert after == before

    def test_held_dice_unchanged_over_many_rolls(self, seeded_rng):
        state = TenziesEngine.roll(TenziesEngine.new_game(seeded_rng), seeded_rng)
        state = TenziesEngine.hold(state, state.dice[0].id)
        state = TenziesEngine.hold(state, state.dice[7].id)
        held = (state.dice[0], state.dice[7])
        for _ in range(100):
            state = TenziesEngine.roll(state, seeded_rng)
            assert (state.dice[0], state.dice[7]) == held

    def test_unheld_dice_rerolled(self, mixed_state, make_rng):
        new_state = TenziesEngine.roll(mixed_state, make_rng(6))
        for before, after in zip(mixed_state.dice, new_state.dice):
            if not before.is_held:
                assert after.value == 6

    def test_only_unheld_dice_draw(self, mixed_state, make_rng):
        rng = make_rng(6)
        TenziesEngine.roll(mixed_state, rng)
        assert rng.calls == 10 - mixed_state.held_count

    def test_ids_stable(self, mixed_state):
        new_state = TenziesEngine.roll(mixed_state)
        assert [d.id for d in new_state.dice] == [d.id for d in mixed_state.dice]

    def test_does_not_mutate_input(self, mixed_state):
        values = mixed_state.values
        TenziesEngine.roll(mixed_state, random.Random(3))
        assert mixed_state.values == values
        assert mixed_state.roll_count == 3

    def test_preserves_elapsed(self, mixed_state):
        assert TenziesEngine.roll(mixed_state).elapsed_seconds == 12

    def test_roll_when_won_resets(self, all_fours_held):
        new_state = TenziesEngine.roll(all_fours_held)
        assert new_state.roll_count == 0
        assert new_state.elapsed_seconds == 0
        assert new_state.held_count == 0
        assert len(new_state.dice) == 10
        assert not {d.id for d in new_state.dice} & {d.id for d in all_fours_held.dice}


# === Hold ===


class TestHold:
    """Tests for TenziesEngine.hold()."""

    def test_toggles_on(self, mixed_state):
        die = mixed_state.dice[1]
        new_state = TenziesEngine.hold(mixed_state, die.id)
        assert new_state.dice[1].is_held is True

    def test_toggles_off(self, mixed_state):
        die = mixed_state.dice[0]
        new_state = TenziesEngine.hold(mixed_state, die.id)
        assert new_state.dice[0].is_held is False

    def test_value_unchanged(self, mixed_state):
        new_state = TenziesEngine.hold(mixed_state, mixed_state.dice[1].id)
        assert new_state.values == mixed_state.values

    def test_other_dice_untouched(self, mixed_state):
        new_state = TenziesEngine.hold(mixed_state, mixed_state.dice[1].id)
        for i, (before, after) in enumerate(zip(mixed_state.dice, new_state.dice)):
            if i != 1:
                assert after is before

    def test_unknown_id_returns_same_state(self, mixed_state):
        assert TenziesEngine.hold(mixed_state, "no-such-die") is mixed_state

    def test_counters_unchanged(self, mixed_state):
        new_state = TenziesEngine.hold(mixed_state, mixed_state.dice[1].id)
        assert new_state.roll_count == mixed_state.roll_count
        assert new_state.elapsed_seconds == mixed_state.elapsed_seconds

    def test_hold_after_win_is_ignored(self, all_fours_held):
        assert TenziesEngine.hold(all_fours_held, all_fours_held.dice[0].id) is all_fours_held

    def test_holding_last_matching_die_wins(self, all_fours_one_unheld):
        new_state = TenziesEngine.hold(all_fours_one_unheld, all_fours_one_unheld.dice[9].id)
        assert new_state.is_won is True


# === Reset ===


class TestReset:
    """Tests for TenziesEngine.reset()."""

    def test_fresh_state(self):
        state = TenziesEngine.reset()
        assert len(state.dice) == 10
        assert state.held_count == 0
        assert state.roll_count == 0
        assert state.elapsed_seconds == 0

    def test_equivalent_to_roll_when_won(self, all_fours_held, make_rng):
        via_roll = TenziesEngine.roll(all_fours_held, make_rng(5))
        via_reset = TenziesEngine.reset(make_rng(5))
        assert via_roll.values == via_reset.values
        assert via_roll.roll_count == via_reset.roll_count == 0
        assert via_roll.held_count == via_reset.held_count == 0


# === Tick ===


class TestTick:
    """Tests for TenziesEngine.tick()."""

    def test_ticks_in_progress(self, mixed_state):
        assert TenziesEngine.tick(mixed_state).elapsed_seconds == 13

    def test_no_tick_when_idle(self):
        state = TenziesEngine.new_game()
        assert TenziesEngine.tick(state) is state

    def test_no_tick_when_won(self, all_fours_held):
        assert TenziesEngine.tick(all_fours_held) is all_fours_held


# === Win Detection ===


class TestIsWon:
    """Tests for TenziesEngine.is_won() and phase()."""

    def test_all_fours_held(self, all_fours_held):
        assert TenziesEngine.is_won(all_fours_held.dice) is True
        assert TenziesEngine.phase(all_fours_held) is GamePhase.WON

    def test_one_unheld(self, all_fours_one_unheld):
        assert TenziesEngine.is_won(all_fours_one_unheld.dice) is False

    def test_all_held_mixed_values(self):
        state = TenziesEngine.from_values((4,) * 9 + (3,), held=range(10))
        assert TenziesEngine.is_won(state.dice) is False

    def test_empty(self):
        assert TenziesEngine.is_won(()) is False


# === Best Score ===


class TestIsBetterScore:
    """Tests for TenziesEngine.is_better_score()."""

    def test_faster_same_rolls_improves(self):
        assert TenziesEngine.is_better_score(5, 18, BestScore(rolls=5, time=20)) is True

    def test_more_rolls_does_not_improve(self):
        assert TenziesEngine.is_better_score(6, 10, BestScore(rolls=5, time=20)) is False

    def test_unset_best(self):
        assert TenziesEngine.is_better_score(50, 500, BestScore()) is True


# === From Values ===


class TestFromValues:
    """Tests for TenziesEngine.from_values()."""

    def test_builds_state(self):
        state = TenziesEngine.from_values((1, 2, 3, 4, 5, 6, 1, 2, 3, 4), held={1}, roll_count=2)
        assert isinstance(state, GameState)
        assert state.dice[1].is_held is True
        assert state.held_count == 1
        assert state.roll_count == 2

    def test_rejects_bad_values(self):
        with pytest.raises(ValueError):
            TenziesEngine.from_values((0,) * 10)

    def test_rejects_negative_counters(self):
        with pytest.raises(ValueError, match="roll_count cannot be negative"):
            TenziesEngine.from_values((1,) * 10, roll_count=-1)

    def test_rejects_out_of_range_held_index(self):
        with pytest.raises(ValueError, match="Held index 10 is out of range"):
            TenziesEngine.from_values((1,) * 10, held={0, 10})

    def test_rejects_negative_held_index(self):
        with pytest.raises(ValueError, match="Held index -1 is out of range"):
            TenziesEngine.from_values((1,) * 10, held=[-1])
