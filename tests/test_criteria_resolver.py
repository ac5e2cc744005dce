from types import SimpleNamespace

from skillframe.levels.criteria import LegacyFields, UnifiedMap, criteria_sources, resolve


def make_sub(level_criteria=None, **legacy):
    return SimpleNamespace(level_criteria=level_criteria, **legacy)


def test_legacy_column_only_resolves_through_mapping():
    sub = make_sub(senior_level=["Does X"])
    assert resolve(sub, "p3_career") == ["Does X"]
    assert resolve(sub, "senior") == ["Does X"]


def test_unified_map_exact_key():
    sub = make_sub({"p2_developing": ["Ships small features"]})
    assert resolve(sub, "p2_developing") == ["Ships small features"]


def test_unified_map_under_legacy_key_is_found_by_new_key():
    sub = make_sub({"lead": ["Leads projects"]})
    assert resolve(sub, "p4_advanced") == ["Leads projects"]


def test_unified_map_under_new_key_is_found_by_legacy_key():
    sub = make_sub({"p1_entry": ["Learns the codebase"]})
    assert resolve(sub, "associate") == ["Learns the codebase"]


def test_unified_map_wins_over_legacy_columns():
    sub = make_sub({"p3_career": ["new"]}, senior_level=["old"])
    assert resolve(sub, "p3_career") == ["new"]


def test_empty_unified_entry_falls_through_to_legacy():
    sub = make_sub({"p3_career": []}, senior_level=["old"])
    assert resolve(sub, "p3_career") == ["old"]


def test_misses_return_empty_list():
    assert resolve(make_sub(), "p3_career") == []
    assert resolve(make_sub({"p1_entry": ["x"]}), "m1_team_lead") == []
    assert resolve(make_sub({"p1_entry": ["x"]}), "does_not_exist") == []


def test_malformed_shapes_degrade_gracefully():
    sub = make_sub(["not", "a", "map"], principal_level="not a list")
    assert resolve(sub, "p5_principal") == []

    sub = make_sub(["not", "a", "map"], principal_level=["Sets direction"])
    assert resolve(sub, "p5_principal") == ["Sets direction"]


def test_dict_records_with_camel_case_legacy_fields():
    record = {"levelCriteria": None, "intermediateLevel": ["Pairs with peers"]}
    assert resolve(record, "p2_developing") == ["Pairs with peers"]


def test_criteria_sources_order():
    sub = make_sub({"p1_entry": ["a"]}, associate_level=["b"])
    sources = criteria_sources(sub)
    assert isinstance(sources[0], UnifiedMap)
    assert isinstance(sources[1], LegacyFields)
    assert sources[1].columns == {"associate": ["b"]}
    assert criteria_sources(make_sub()) == []
