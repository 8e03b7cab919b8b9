from plotspec.services.merge import deep_merge, merge_into


def test_deep_merge_keeps_untouched_keys():
    base = {"xaxis": {"title": "X", "type": "date"}, "showlegend": True}
    merged = deep_merge(base, {"xaxis": {"title": "Time"}})
    assert merged == {"xaxis": {"title": "Time", "type": "date"}, "showlegend": True}


def test_deep_merge_identities():
    a = {"a": 1, "b": {"c": [1, 2]}}
    assert deep_merge(a, {}) == a
    assert deep_merge({}, a) == a
    assert deep_merge(None, None) == {}


def test_deep_merge_is_right_biased_for_non_mappings():
    assert deep_merge({"a": {"b": 1}}, {"a": 5}) == {"a": 5}
    assert deep_merge({"a": 5}, {"a": {"b": 1}}) == {"a": {"b": 1}}
    assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}


def test_deep_merge_does_not_alias_inputs():
    base = {"xaxis": {"title": "X"}}
    upd = {"yaxis": {"title": "Y"}}
    merged = deep_merge(base, upd)
    merged["xaxis"]["title"] = "changed"
    merged["yaxis"]["title"] = "changed"
    assert base == {"xaxis": {"title": "X"}}
    assert upd == {"yaxis": {"title": "Y"}}


def test_merge_into_keeps_nested_identity():
    axis = {"title": "X"}
    target = {"xaxis": axis}
    merge_into(target, {"xaxis": {"range": [0, 1]}, "height": 400})
    assert target["xaxis"] is axis
    assert axis == {"title": "X", "range": [0, 1]}
    assert target["height"] == 400
