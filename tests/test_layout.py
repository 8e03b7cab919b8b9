from datetime import date, datetime, timezone

import numpy as np
import pandas as pd
import pytest

from plotspec.services.errors import InvalidOptionError, MultiAxisError
from plotspec.services.layout import add_range_slider, set_layout, xaxis_keys
from plotspec.services.scoped_attrs import finalize_layout
from plotspec.services.specification import Specification
from plotspec.services.timeconv import to_milliseconds


def test_set_layout_records_under_current_scope():
    spec = Specification(current_scope="sales")
    result = set_layout(spec, {"title": "Sales"}, showlegend=False)
    assert result is spec
    assert spec.layout == {}
    assert spec.layout_overrides_by_scope == {"sales": [{"title": "Sales", "showlegend": False}]}


def test_set_layout_explicit_scope():
    spec = Specification(current_scope="sales")
    set_layout(spec, {"title": "Costs"}, scope="costs")
    set_layout(spec, {"title": "Default"}, scope=None)
    assert list(spec.layout_overrides_by_scope) == ["costs", None]


def test_set_layout_size_is_deprecated_but_kept(caplog):
    spec = Specification()
    with caplog.at_level("WARNING"):
        set_layout(spec, width=800)
    assert spec.diagnostics.codes() == ["layout-size"]
    assert "width/height" in caplog.text
    finalize_layout(spec)
    assert spec.layout["width"] == 800


def test_set_layout_without_size_has_no_diagnostics():
    spec = set_layout(Specification(), {"height": None, "title": "T"})
    assert len(spec.diagnostics) == 0


def test_set_layout_on_list_of_specs():
    first = Specification(current_scope="a")
    second = Specification()
    bundle = [first, "<div>caption</div>", second]
    result = set_layout(bundle, {"title": "Shared"})
    assert result[1] == "<div>caption</div>"
    assert first.layout_overrides_by_scope == {"a": [{"title": "Shared"}]}
    assert second.layout_overrides_by_scope == {None: [{"title": "Shared"}]}


def test_xaxis_keys():
    assert xaxis_keys({"xaxis": {}, "xaxis2": {}, "yaxis": {}}) == ["xaxis", "xaxis2"]


def test_range_slider_rejects_multiple_xaxes():
    spec = Specification(layout={"xaxis": {"title": "a"}, "xaxis2": {"title": "b"}})
    with pytest.raises(MultiAxisError):
        add_range_slider(spec, 0, 10)
    assert spec.layout == {"xaxis": {"title": "a"}, "xaxis2": {"title": "b"}}


def test_range_slider_auto_bounds_on_implicit_axis():
    spec = add_range_slider(Specification())
    assert spec.layout["xaxis"]["range"] == [None, None]
    assert spec.layout["xaxis"]["rangeslider"] == {"visible": True}


def test_range_slider_dates_to_milliseconds():
    axis = {"title": "time"}
    spec = Specification(layout={"xaxis": axis})
    add_range_slider(spec, date(2016, 1, 1), date(2016, 1, 2), thickness=0.1)
    assert spec.layout["xaxis"] is axis
    assert axis["title"] == "time"
    assert axis["range"] == [1451606400000.0, 1451692800000.0]
    assert axis["rangeslider"] == {"visible": True, "thickness": 0.1}


def test_range_slider_is_applied_immediately():
    spec = Specification()
    set_layout(spec, {"xaxis": {"title": "X"}})
    add_range_slider(spec, 1, 5)
    assert spec.layout["xaxis"]["range"] == [1, 5]
    finalize_layout(spec)
    assert spec.layout["xaxis"] == {"title": "X", "range": [1, 5], "rangeslider": {"visible": True}}


def test_range_slider_bad_bound_leaves_spec_untouched():
    spec = Specification()
    with pytest.raises(InvalidOptionError):
        add_range_slider(spec, "not a date", None)
    assert spec.layout == {}


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        (pd.NaT, None),
        (float("nan"), None),
        (42, 42),
        (np.int64(7), 7),
        ("3.5", 3.5),
        (date(1970, 1, 2), 86400000.0),
        (datetime(1970, 1, 1, 0, 0, 1), 1000.0),
        (datetime(1970, 1, 1, 1, 0, tzinfo=timezone.utc), 3600000.0),
        (pd.Timestamp("1970-01-01T02:00:00+02:00"), 0.0),
        (np.datetime64("1970-01-01T00:00:02"), 2000.0),
        ("2016-01-01", 1451606400000.0),
        ("", None),
        ("  ", None),
        ("nan", None),
        ("NaT", None),
    ],
)
def test_to_milliseconds(value, expected):
    assert to_milliseconds(value) == expected


def test_to_milliseconds_rejects_bool():
    with pytest.raises(InvalidOptionError):
        to_milliseconds(True)


@pytest.mark.parametrize("value", ["inf", "-inf", "tomorrow-ish"])
def test_to_milliseconds_rejects_unusable_strings(value):
    with pytest.raises(InvalidOptionError):
        to_milliseconds(value)


def test_range_slider_missing_string_bounds_are_auto():
    spec = add_range_slider(Specification(), "nan", "")
    assert spec.layout["xaxis"]["range"] == [None, None]


def test_set_layout_reserved_scope_leaves_no_trace():
    spec = Specification()
    with pytest.raises(InvalidOptionError):
        set_layout(spec, {"width": 500}, scope="__default__")
    assert spec.layout_overrides_by_scope == {}
    assert len(spec.diagnostics) == 0
