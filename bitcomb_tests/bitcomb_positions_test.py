import suite
from bitcomb import (
    all_combinations, qualifying_combinations, combinations_of_length, combination_at,
    position_of, position_of_qualifying, position_of_length,
    qualifying_positions, length_positions, qualifying_length_positions,
    TargetNotFoundError
)

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

simple_list = [1, 2, 3]
wider_list = [10, 20, 30, 40, 50]
list_with_dupes = [1, 2, 2, 3]
sum_below_five = lambda c: sum(c) < 5


# --- single lookups ---

@test("position_of is the 1-indexed rank in the full enumeration")
def test_position_of():
    assert_that(position_of(simple_list, [1, 2]) == 3, "[1, 2] is the third combination")
    assert_that(position_of(simple_list, 6) == 6, "an explicit mask is its own position")
    for i, combo in enumerate(all_combinations(wider_list), 1):
        assert_that(position_of(wider_list, combo) == i, f"{combo} should be at position {i}")


@test("position_of_length ranks within one length")
def test_position_of_length():
    assert_that(position_of_length(simple_list, 2, [2, 3]) == 3, "[2, 3] is the third pair")
    assert_that(position_of_length(simple_list, 2, 5) == 2, "mask 0b101 is the second pair")
    for k in range(1, len(wider_list) + 1):
        for i, combo in enumerate(combinations_of_length(wider_list, k), 1):
            assert_that(position_of_length(wider_list, k, combo) == i, f"{combo} should be pair-rank {i} for k={k}")


@test("position_of_length rejects targets of another length")
def test_position_of_length_mismatch():
    assert_raises(TargetNotFoundError, position_of_length, simple_list, 2, [1, 2, 3], message="triple is not a pair")
    assert_raises(TargetNotFoundError, position_of_length, simple_list, 2, 7, message="mask 0b111 has three bits")
    assert_raises(TargetNotFoundError, position_of_length, simple_list, 0, 1, message="nothing has length 0")


@test("position_of_qualifying ranks among qualifying combinations only")
def test_position_of_qualifying():
    assert_that(position_of_qualifying(simple_list, sum_below_five, [1, 3]) == 5, "[1, 3] is the fifth qualifier")
    assert_that(position_of_qualifying(simple_list, sum_below_five, [3]) == 4, "[3] is the fourth qualifier")
    assert_that(position_of_qualifying(simple_list, sum_below_five, 1) == 1, "mask 1 is the first qualifier")
    for i, combo in enumerate(qualifying_combinations(wider_list, lambda c: len(c) % 2 == 1), 1):
        rank = position_of_qualifying(wider_list, lambda c: len(c) % 2 == 1, combo)
        assert_that(rank == i, f"{combo} should be qualifier {i}")


@test("position_of_qualifying fails fast for a target that does not qualify")
def test_position_of_qualifying_mismatch():
    e = assert_raises(TargetNotFoundError, position_of_qualifying, simple_list, sum_below_five, [2, 3])
    assert_that(isinstance(e, ValueError), "not-found is a ValueError")
    assert_raises(TargetNotFoundError, position_of_qualifying, simple_list, sum_below_five, 7)


@test("value lookups resolve duplicates to the lowest matching mask")
def test_positions_with_duplicates():
    assert_that(position_of(list_with_dupes, [1, 2, 3]) == 0b1011, "first [1, 2, 3] uses the first 2")
    assert_that(position_of_length(list_with_dupes, 3, [1, 2, 3]) == 2, "first [1, 2, 3] is the second triple")
    assert_that(position_of_length(list_with_dupes, 3, 0b1101) == 3, "the second [1, 2, 3] is reachable by mask")


@test("value lookups accept a custom matcher")
def test_positions_with_matcher():
    same_letter = lambda a, b: a.lower() == b.lower()
    letters = ['a', 'b', 'c']
    assert_that(position_of(letters, ['A', 'C'], same_letter) == 5, "case-insensitive [a, c]")
    assert_that(position_of_length(letters, 2, ['B', 'C'], same_letter) == 3, "case-insensitive [b, c]")
    assert_that(position_of_qualifying(letters, lambda c: 'a' in c, ['A', 'C'], same_letter) == 3,
                "[a, c] is the third combination containing 'a'")


@test("lookups for targets outside the enumeration raise TargetNotFoundError")
def test_position_not_found():
    assert_raises(TargetNotFoundError, position_of, simple_list, 0, message="mask 0")
    assert_raises(TargetNotFoundError, position_of, simple_list, 8, message="mask past 2^n - 1")
    assert_raises(TargetNotFoundError, position_of, simple_list, [4], message="unknown value")
    assert_raises(TargetNotFoundError, position_of, [], [1], message="empty input")
    assert_raises(TypeError, position_of, simple_list, True, message="bool target")


# --- position lists ---

@test("qualifying_positions lists the masks of qualifying combinations")
def test_qualifying_positions():
    positions = qualifying_positions(simple_list, sum_below_five)
    assert_that(positions == [1, 2, 3, 4, 5], "sum < 5 qualifies masks 1 to 5")
    combos = [combination_at(simple_list, p) for p in positions]
    assert_that(combos == qualifying_combinations(simple_list, sum_below_five), "positions map back to combinations")
    assert_that(qualifying_positions(simple_list, lambda c: False) == [], "nothing qualifies")


@test("length_positions lists the masks with a given popcount")
def test_length_positions():
    assert_that(length_positions(simple_list, 2) == [3, 5, 6], "pairs of [1, 2, 3]")
    assert_that(length_positions(simple_list, 0) == [], "length 0 has no positions")
    assert_that(length_positions(simple_list, 4) == [], "length > n has no positions")

    twenty = list(range(1, 21))
    assert_that(len(length_positions(twenty, 10)) == 184756, "C(20, 10)")
    assert_that(len(length_positions(twenty, 11)) == 167960, "C(20, 11)")
    assert_that(len(length_positions(twenty, 9)) == 167960, "C(20, 9)")


@test("qualifying_length_positions combines both filters")
def test_qualifying_length_positions():
    result = qualifying_length_positions(simple_list, 2, sum_below_five)
    assert_that(result == [3, 5], "[1, 2] and [1, 3] are the pairs summing below 5")
    assert_that(qualifying_length_positions(simple_list, 0, sum_below_five) == [], "length 0")
    assert_that(qualifying_length_positions(simple_list, 3, sum_below_five) == [], "the full triple sums to 6")


if __name__ == "__main__":
    suite.run(title="bitcomb position test suite")
