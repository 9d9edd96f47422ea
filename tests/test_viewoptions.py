from grepkit.viewoptions import ViewOptions

NAMES = ["search", "filter", "display", "navigate", "cache"]


def test_defaults_are_hidden():
    options = ViewOptions()
    assert [getattr(options, name) for name in NAMES] == [False] * 5
    assert options.all() is False


def test_toggles_flip_one_field():
    for name in NAMES:
        options = ViewOptions()
        getattr(options, f"toggle_{name}")()
        assert getattr(options, name) is True
        assert sum(getattr(options, other) for other in NAMES) == 1
        getattr(options, f"toggle_{name}")()
        assert options == ViewOptions()


def test_set_all():
    options = ViewOptions(search=True)
    options.set_all(True)
    assert options.all() is True
    options.set_all(False)
    assert options == ViewOptions()


def test_all_needs_every_field():
    options = ViewOptions(True, True, True, True, False)
    assert options.all() is False
    options.toggle_cache()
    assert options.all() is True


def test_json_round_trip():
    options = ViewOptions(search=True, display=True, cache=True)
    data = options.to_json()
    assert sorted(data) == sorted(NAMES)
    assert ViewOptions.from_json(data) == options


def test_from_json_ignores_non_booleans():
    options = ViewOptions.from_json({"search": 1, "filter": "yes", "display": True})
    assert options == ViewOptions(display=True)


def test_from_json_missing_keys():
    assert ViewOptions.from_json({}) == ViewOptions()