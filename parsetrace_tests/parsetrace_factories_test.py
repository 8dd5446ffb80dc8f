import suite
from parsetrace import (
    ParseResult, InvalidArgument, empty, from_pairs, from_lists, from_prefixes, P
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


@test("empty creates a result with no entries")
def test_empty():
    result = empty("123 apples")
    assert_that(isinstance(result, ParseResult), "should be a parse result")
    assert_that(result.input == "123 apples" and result.entries() == [], "should only hold the input")


@test("from_pairs pushes pairs in order")
def test_from_pairs():
    result = from_pairs("123 apples", [("1", "23 apples"), ("12", "3 apples")])
    assert_that(result.entries() == [("1", "23 apples"), ("12", "3 apples")], f"got {result.entries()}")


@test("from_pairs accepts any iterable, including generators")
def test_from_pairs_generator():
    result = from_pairs("ab", ((c, "") for c in "ab"))
    assert_that(result.values() == ["a", "b"], f"got {result.values()}")


@test("from_pairs rejects malformed pairs")
def test_from_pairs_malformed():
    with assert_raises(InvalidArgument, "index 1"):
        from_pairs("ab", [("a", "b"), ("a", "b", "c")])


@test("from_lists matches the constructor")
def test_from_lists():
    result = from_lists("ab", ["a"], ["b"])
    assert_that(result == ParseResult("ab", ["a"], ["b"]), "should equal constructor result")
    with assert_raises(InvalidArgument):
        from_lists("ab", ["a", "ab"], ["b"])


@test("from_prefixes yields every non-empty prefix")
def test_from_prefixes():
    result = from_prefixes("123")
    assert_that(result.entries() == [("1", "23"), ("12", "3"), ("123", "")], f"got {result.entries()}")
    assert_that(from_prefixes("").entries() == [], "empty input has no prefixes")
    assert_that(result.completed().values() == ["123"], "only the last prefix consumes everything")


@test("P is an alias for from_pairs")
def test_alias():
    assert_that(P is from_pairs, "alias should point at from_pairs")


if __name__ == "__main__":
    suite.run(title="parsetrace factory functions test suite")
