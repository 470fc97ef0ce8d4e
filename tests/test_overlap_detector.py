from pathoverlap.detect.overlap import check_all, check_single
from pathoverlap.domain.models import MethodScope, OverlapRecord, ParamRule
from pathoverlap.index.endpoint_index import EndpointIndex, build_index


def test_check_single_matches_param_route_with_declared_method():
    assert check_single("/a/b", "get", {"/a/{id}": ["get", "post"]}) == "/a/{id}"


def test_check_single_method_not_declared():
    assert check_single("/a/b", "delete", {"/a/{id}": ["get", "post"]}) is None


def test_check_single_lowercases_candidate_method():
    assert check_single("/a/b", "GET", {"/a/{id}": ["get"]}) == "/a/{id}"


def test_check_single_does_not_fold_declared_methods_by_default():
    index = {"/a/{id}": ["GET"]}
    assert check_single("/a/b", "get", index) is None
    assert check_single("/a/b", "get", index, fold_method_case=True) == "/a/{id}"


def test_check_single_without_method_matches_any_entry():
    assert check_single("/a/b", None, {"/a/{id}": []}) == "/a/{id}"
    assert check_single("/a/b", "", {"/a/{id}": ["get"]}) == "/a/{id}"


def test_check_single_normalizes_candidate():
    assert check_single("/users/", "get", {"/users": ["get"]}) == "/users"


def test_check_single_first_match_in_index_order_wins():
    index = build_index(
        {
            "paths": {
                "/users/{id}": {"get": {}},
                "/users/me": {"get": {}},
            }
        }
    )
    assert check_single("/users/me", "get", index) == "/users/{id}"


def test_check_single_skips_entries_without_the_method():
    index = EndpointIndex.from_tree(
        {
            "/users/{id}": ["delete"],
            "/users/me": ["get"],
        }
    )
    assert check_single("/users/me", "get", index) == "/users/me"


def test_check_single_candidate_params_follow_rule():
    index = {"/users/me": ["get"]}
    assert check_single("/users/{id}", "get", index) is None
    assert check_single("/users/{id}", "get", index, rule=ParamRule.SYMMETRIC) == "/users/me"


def test_check_single_no_overlap():
    assert check_single("/orders", "get", {"/users": ["get"], "/users/{id}": ["get"]}) is None


def test_check_all_reports_pair_in_index_order():
    index = {"/a/{id}": ["get"], "/a/b": ["post"], "/c": ["get"]}
    assert check_all(index) == [OverlapRecord(path1="/a/{id}", path2="/a/b")]


def test_check_all_ignores_methods_by_default():
    index = {"/a/{id}": ["get"], "/a/b": ["post"]}
    assert len(check_all(index)) == 1
    assert check_all(index, method_scope=MethodScope.SHARED) == []


def test_check_all_shared_scope_keeps_pairs_with_common_method():
    index = {"/a/{id}": ["get", "put"], "/a/b": ["put"]}
    assert check_all(index, method_scope=MethodScope.SHARED) == [OverlapRecord("/a/{id}", "/a/b")]


def test_check_all_existing_rule_only_uses_later_params():
    index = {"/a/{id}": ["get"], "/a/b": ["get"]}
    assert check_all(index, rule=ParamRule.EXISTING) == []

    index = {"/a/b": ["get"], "/a/{id}": ["get"]}
    assert check_all(index, rule=ParamRule.EXISTING) == [OverlapRecord("/a/b", "/a/{id}")]


def test_check_all_order_follows_document_order():
    doc = {
        "paths": {
            "/x/{id}": {"get": {}},
            "/y/{id}": {"get": {}},
            "/y/one": {"get": {}},
            "/x/one": {"get": {}},
            "/x/two": {"get": {}},
        }
    }
    overlaps = check_all(build_index(doc))
    assert [(o.path1, o.path2) for o in overlaps] == [
        ("/x/{id}", "/x/one"),
        ("/x/{id}", "/x/two"),
        ("/y/{id}", "/y/one"),
    ]


def test_check_all_is_deterministic():
    index = build_index(
        {"paths": {"/a/{id}": {"get": {}}, "/a/b": {"get": {}}, "/{any}/b": {"get": {}}}}
    )
    first = check_all(index)
    assert first == check_all(index)
    assert [o.as_dict() for o in first] == [
        {"path1": "/a/{id}", "path2": "/a/b"},
        {"path1": "/a/{id}", "path2": "/{any}/b"},
        {"path1": "/a/b", "path2": "/{any}/b"},
    ]


def test_check_all_empty_and_single_entry():
    assert check_all({}) == []
    assert check_all({"/a": ["get"]}) == []
