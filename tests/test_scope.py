import math

from permtree.scope import PermissionScope


def test_parse_splits_tiers():
    scope = PermissionScope("alpha:beta:charlie:delta")
    assert scope.to_list() == ["alpha", "beta", "charlie", "delta"]
    assert PermissionScope.parse("glimpse").to_list() == ["glimpse"]
    assert PermissionScope.parse("*").to_list() == ["*"]


def test_empty_scope_has_no_tiers():
    assert PermissionScope().to_list() == []
    assert PermissionScope("").to_list() == []
    assert len(PermissionScope("")) == 0


def test_wildcard_count():
    assert PermissionScope("glimpse").wildcard_count == 0
    assert PermissionScope("glimpse:*").wildcard_count == 1
    assert PermissionScope("glimpse:*:*").wildcard_count == 2
    assert PermissionScope("*:*:*").wildcard_count == 3
    assert PermissionScope("abc:*:test").wildcard_count == 1
    assert PermissionScope("abc:*substring*:test").wildcard_count == 0


def test_wildcard_count_tracks_push_and_pop():
    scope = PermissionScope("a:*")
    scope.push_tier("*:b:*")
    assert scope.wildcard_count == 3
    assert scope.pop_tier() == "*"
    assert scope.wildcard_count == 2
    scope.push_tier(PermissionScope("*"))
    assert scope.wildcard_count == 3


def test_copy_is_independent():
    original = PermissionScope("one:two:three")
    duplicate = original.copy()
    assert duplicate is not original
    assert duplicate == original

    duplicate.push_tier("four")
    assert original.to_list() == ["one", "two", "three"]
    original.pop_tier()
    assert duplicate.to_list() == ["one", "two", "three", "four"]


def test_to_list_returns_a_copy():
    scope = PermissionScope("a:b")
    tiers = scope.to_list()
    tiers.append("c")
    assert scope.size == 2


def test_str_round_trip():
    text = "testing:123:456:hello"
    assert str(PermissionScope(text)) == text
    assert PermissionScope.parse(str(PermissionScope(text))).to_list() == text.split(":")
    assert str(PermissionScope()) == ""


def test_at():
    scope = PermissionScope("berries:and:cream")
    assert scope.at(0) == "berries"
    assert scope.at(-0) == "berries"
    assert scope.at(1) == "and"
    assert scope.at(2) == "cream"
    assert scope.at(-1) == "cream"
    assert scope.at(-3) == "berries"
    assert scope.at(3) is None
    assert scope.at(-5) is None
    assert scope.at(1.9) == "and"
    assert scope.at(-0.5) == "cream"
    assert PermissionScope().at(0) is None
    assert scope.at(math.inf) is None
    assert scope.at(-math.inf) is None
    assert scope.at(math.nan) is None


def test_size_follows_push_and_pop():
    scope = PermissionScope("gopher:gopher:gopher:porcupine")
    assert scope.size == 4
    scope.pop_tier()
    assert scope.size == 3
    scope.push_tier("gopher")
    assert scope.size == 4
    for _ in range(6):
        scope.pop_tier()
    assert scope.size == 0
    assert scope.pop_tier() is None


def test_iteration():
    scope = PermissionScope("wow:iteration:alliteration")
    assert list(scope) == ["wow", "iteration", "alliteration"]
    for i, tier in enumerate(scope):
        assert tier == scope.at(i)


def test_push_tier_strings_and_scopes():
    scope = PermissionScope("testing:123")
    scope.push_tier("koala:zoo")
    scope.push_tier(PermissionScope("penguin"))
    assert scope.to_list() == ["testing", "123", "koala", "zoo", "penguin"]


def test_push_empty_string_appends_empty_tier():
    scope = PermissionScope("a")
    scope.push_tier("")
    assert scope.to_list() == ["a", ""]


def test_includes_literal_scope():
    scope = PermissionScope("rpitv:this_is:a_scope")
    assert scope.includes("testing:123") is False
    assert scope.includes("rpitv:testing:123") is False
    assert scope.includes("rpitv:this_is:123") is False
    assert scope.includes("rpitv:this_is:a_scope!") is False
    assert scope.includes("rpitv:this_is:a_scope:123") is False
    assert scope.includes("rpitv:this_is") is False
    assert scope.includes("rpitv:this_is:a_scope") is True


def test_includes_inner_wildcard_covers_one_tier():
    scope = PermissionScope("rpitv:*:a_scope")
    assert scope.includes("rpitv:anything:a_scope") is True
    assert scope.includes("rpitv:*:a_scope") is True
    assert scope.includes("rpitv::a_scope") is True
    assert scope.includes("rpitv:anything:a_scope:extra") is False
    assert scope.includes("rpitv:this_is:123") is False
    assert scope.includes(PermissionScope("rpitv:this_isnt:a_scope")) is True


def test_includes_trailing_wildcard_covers_any_depth():
    scope = PermissionScope("*")
    assert scope.includes("test") is True
    assert scope.includes("anything:at:all:depth") is True
    assert scope.includes("*:*:*:*:*") is True
    assert scope.includes("*********************************:") is True
    assert scope.includes("") is False
    assert scope.includes(PermissionScope()) is False

    assert PermissionScope("glimpse:*").includes("glimpse:users:read") is True
    assert PermissionScope("glimpse:*").includes("glimpse") is False


def test_includes_itself():
    for text in ("a", "a:b:c", "*:b", "a:*", "*"):
        scope = PermissionScope(text)
        assert scope.includes(scope) is True


def test_compare_by_tier_count():
    assert PermissionScope("rpitv:glimpse").compare(PermissionScope("rpitv:glimpse:users")) > 0
    assert PermissionScope("glimpse:one").compare(PermissionScope("abcd")) < 0
    assert PermissionScope("glimpse:users:read:*").compare(PermissionScope("glimpse:users:read")) < 0
    assert PermissionScope("*:*:*").compare(PermissionScope("*:*")) < 0


def test_compare_by_wildcard_count():
    assert PermissionScope("rpitv:glimpse:*").compare(PermissionScope("rpitv:glimpse:users")) > 0
    assert PermissionScope("glimpse:one").compare(PermissionScope("*:one")) < 0
    assert PermissionScope("*:*").compare(PermissionScope("*:one")) > 0


def test_compare_ties():
    assert PermissionScope("glimpse:one").compare(PermissionScope("xyz:one")) == 0
    assert PermissionScope("*:two").compare(PermissionScope("*:one")) == 0
    assert PermissionScope("*:*").compare(PermissionScope("*:*")) == 0


def test_equal_scopes_hash_equal():
    assert hash(PermissionScope("a:*:c")) == hash(PermissionScope("a:*:c"))
    assert len({PermissionScope("a:b"), PermissionScope("a:b"), PermissionScope("a")}) == 2
