"""Tests for connection risk: rule table, path search, path-aware classification."""

import networkx as nx

from conftest import make_chain, make_graph, make_node

from posture.defaults import MAX_PATH_DEPTH
from posture.models import ConnectionRisk, Graph
from posture.risk import (
    RULES,
    apply_rule,
    build_graph,
    classify_direct,
    evaluate_connection,
    evaluate_path,
    find_paths,
    graph_metrics,
    risk_message,
    rule_for,
)

SECURE = ConnectionRisk.SECURE
WARNING = ConnectionRisk.WARNING


# ---------------------------------------------------------------------------
# Static rules
# ---------------------------------------------------------------------------

class TestDirectRules:
    def test_firewall_to_application_needs_waf(self):
        assert classify_direct("firewall", "webapp") == WARNING
        assert classify_direct("firewall", "api") == WARNING

    def test_firewall_to_network_is_secure(self):
        for target in ("router", "switch", "waf"):
            assert classify_direct("firewall", target) == SECURE

    def test_firewall_default_is_warning(self):
        assert classify_direct("firewall", "database") == WARNING

    def test_router_rules(self):
        assert classify_direct("router", "firewall") == SECURE
        assert classify_direct("router", "switch") == SECURE
        assert classify_direct("router", "server") == WARNING

    def test_switch_and_wap_rules(self):
        assert classify_direct("switch", "server") == SECURE
        assert classify_direct("switch", "endpoint") == SECURE
        assert classify_direct("switch", "router") == WARNING
        assert classify_direct("wap", "switch") == SECURE
        assert classify_direct("wap", "server") == WARNING

    def test_endpoint_rules(self):
        assert classify_direct("endpoint", "wap") == WARNING
        assert classify_direct("endpoint", "switch") == SECURE

    def test_server_rules(self):
        assert classify_direct("server", "database") == SECURE
        assert classify_direct("server", "storage") == SECURE
        assert classify_direct("server", "webapp") == WARNING

    def test_webapp_to_database_without_waf(self):
        assert classify_direct("webapp", "database") == WARNING

    def test_webapp_secure_targets(self):
        assert classify_direct("webapp", "api") == SECURE
        assert classify_direct("webapp", "waf") == SECURE

    def test_database_secure_towards_perimeter(self):
        assert classify_direct("database", "storage") == SECURE
        assert classify_direct("database", "firewall") == SECURE
        assert classify_direct("database", "waf") == SECURE
        assert classify_direct("database", "server") == WARNING

    def test_api_and_microservices_need_controls_on_path(self):
        assert classify_direct("api", "database") == WARNING
        assert classify_direct("api", "storage") == WARNING
        assert classify_direct("microservices", "api") == WARNING

    def test_storage_needs_encryption(self):
        assert classify_direct("storage", "server") == WARNING

    def test_waf_rules(self):
        for target in ("webapp", "api", "database"):
            assert classify_direct("waf", target) == SECURE
        assert classify_direct("waf", "router") == WARNING

    def test_controls_are_secure_sources(self):
        for control in ("iam", "dlp", "ids", "siem", "edr", "encryption"):
            assert classify_direct(control, "webapp") == SECURE
            assert classify_direct(control, "database") == SECURE

    def test_controls_are_secure_targets(self):
        for control in ("iam", "dlp", "ids", "siem", "edr", "encryption"):
            assert classify_direct("firewall", control) == SECURE
            assert classify_direct("loadbalancer", control) == SECURE

    def test_unknown_types_default_to_warning(self):
        assert classify_direct("loadbalancer", "switch") == WARNING
        assert classify_direct("quantum-router", "webapp") == WARNING
        assert classify_direct(None, None) == WARNING

    def test_rule_for_unknown_returns_default(self):
        rule = rule_for("no-such-type")
        assert rule.clauses == ()
        assert rule.default == WARNING
        assert rule_for(None).default == WARNING

    def test_required_control_anywhere_on_type_path(self):
        assert apply_rule(RULES["api"], "database", ["api", "firewall", "database"]) == SECURE
        assert apply_rule(RULES["storage"], "server", ["storage", "encryption", "server"]) == SECURE
        assert apply_rule(RULES["microservices"], "database", ["microservices", "waf"]) == SECURE


# ---------------------------------------------------------------------------
# Path search
# ---------------------------------------------------------------------------

class TestFindPaths:
    def test_single_direct_path(self):
        G = build_graph(make_graph(["a-1", "b-1"], [("a-1", "b-1")]))
        assert find_paths(G, "a-1", "b-1") == [["a-1", "b-1"]]

    def test_diamond_has_two_paths(self):
        G = build_graph(make_graph(
            ["a-1", "b-1", "c-1", "d-1"],
            [("a-1", "b-1"), ("a-1", "c-1"), ("b-1", "d-1"), ("c-1", "d-1")],
        ))
        paths = find_paths(G, "a-1", "d-1")
        assert sorted(paths) == [["a-1", "b-1", "d-1"], ["a-1", "c-1", "d-1"]]

    def test_direction_matters(self):
        G = build_graph(make_graph(["a-1", "b-1"], [("a-1", "b-1")]))
        assert find_paths(G, "b-1", "a-1") == []

    def test_cycle_never_repeats_a_node(self):
        G = build_graph(make_graph(
            ["a-1", "b-1", "c-1", "d-1"],
            [("a-1", "b-1"), ("b-1", "c-1"), ("c-1", "a-1"), ("c-1", "d-1")],
        ))
        paths = find_paths(G, "a-1", "d-1")
        assert paths == [["a-1", "b-1", "c-1", "d-1"]]
        for p in paths:
            assert len(p) == len(set(p))

    def test_path_at_depth_bound_is_found(self):
        ids = [f"n-{i}" for i in range(MAX_PATH_DEPTH + 1)]
        G = build_graph(make_chain(*ids))
        paths = find_paths(G, ids[0], ids[-1])
        assert len(paths) == 1
        assert len(paths[0]) - 1 == MAX_PATH_DEPTH

    def test_path_beyond_depth_bound_is_truncated(self):
        ids = [f"n-{i}" for i in range(MAX_PATH_DEPTH + 2)]
        G = build_graph(make_chain(*ids))
        assert find_paths(G, ids[0], ids[-1]) == []

    def test_custom_depth(self):
        G = build_graph(make_chain("a-1", "b-1", "c-1", "d-1"))
        assert find_paths(G, "a-1", "d-1", max_depth=2) == []
        assert len(find_paths(G, "a-1", "d-1", max_depth=3)) == 1

    def test_complete_enumeration_in_dense_graph(self):
        # complete digraph on 5 nodes: every ordering of the 3 middle nodes
        ids = [f"n-{i}" for i in range(5)]
        pairs = [(a, b) for a in ids for b in ids if a != b]
        G = build_graph(make_graph(ids, pairs))
        paths = find_paths(G, "n-0", "n-4")
        # 1 direct + 3 one-stop + 6 two-stop + 6 three-stop
        assert len(paths) == 16
        assert all(p[0] == "n-0" and p[-1] == "n-4" for p in paths)
        assert len({tuple(p) for p in paths}) == 16

    def test_unknown_endpoint(self):
        G = build_graph(make_graph(["a-1"]))
        assert find_paths(G, "a-1", "missing-1") == []
        assert find_paths(G, "missing-1", "a-1") == []

    def test_same_source_and_target(self):
        G = build_graph(make_graph(["a-1"]))
        assert find_paths(G, "a-1", "a-1") == [["a-1"]]


class TestGraphMetrics:
    def test_empty(self):
        gm = graph_metrics(nx.DiGraph())
        assert gm["nodes"] == 0
        assert gm["components"] == 0

    def test_basic(self):
        G = build_graph(make_graph(
            ["a-1", "b-1", "c-1"], [("a-1", "b-1"), ("b-1", "a-1")],
        ))
        gm = graph_metrics(G)
        assert gm["nodes"] == 3
        assert gm["edges"] == 2
        assert gm["components"] == 2
        assert gm["isolated"] == ["c-1"]
        assert gm["cyclic"] is True

    def test_node_types_carried(self):
        G = build_graph(make_graph(["firewall-1"]))
        assert G.nodes["firewall-1"]["type_id"] == "firewall"


# ---------------------------------------------------------------------------
# Path evaluation
# ---------------------------------------------------------------------------

class TestEvaluatePath:
    def test_database_behind_waf_and_firewall(self):
        risk, _ = evaluate_path(["firewall", "waf", "webapp", "database"])
        assert risk == SECURE

    def test_database_without_perimeter(self):
        risk, message = evaluate_path(["webapp", "api", "database"])
        assert risk == WARNING
        assert "WAF/Firewall" in message

    def test_application_without_iam(self):
        risk, message = evaluate_path(["firewall", "waf", "webapp"])
        assert risk == WARNING
        assert "authentication" in message

    def test_application_with_iam(self):
        assert evaluate_path(["firewall", "iam", "api"])[0] == SECURE

    def test_plain_network_path(self):
        assert evaluate_path(["firewall", "router", "switch"])[0] == SECURE


# ---------------------------------------------------------------------------
# Connection evaluation
# ---------------------------------------------------------------------------

class TestEvaluateConnection:
    def test_fresh_edge_uses_static_rule(self):
        graph = make_graph(["firewall-1", "webapp-1"])
        verdict = evaluate_connection(graph, "firewall-1", "webapp-1")
        assert verdict.risk == WARNING
        assert verdict.valid is True
        assert verdict.paths == []
        assert verdict.message == "Connection from firewall to webapp may need additional security controls"

    def test_secure_static_message(self):
        graph = make_graph(["firewall-1", "router-1"])
        verdict = evaluate_connection(graph, "firewall-1", "router-1")
        assert verdict.risk == SECURE
        assert verdict.message.startswith("Secure connection from firewall to router")

    def test_existing_path_through_controls_is_secure(self):
        graph = make_chain("firewall-1", "waf-1", "webapp-1", "database-1")
        verdict = evaluate_connection(graph, "firewall-1", "database-1")
        assert verdict.risk == SECURE
        assert verdict.message == "Secure path exists through security controls"
        assert verdict.paths == [["firewall-1", "waf-1", "webapp-1", "database-1"]]

    def test_existing_path_overrides_static_rule(self):
        # firewall -> webapp is a warning as a fresh edge, but IAM is already in between
        graph = make_chain("firewall-1", "iam-1", "webapp-1")
        assert evaluate_connection(graph, "firewall-1", "webapp-1").risk == SECURE

    def test_all_paths_warning(self):
        graph = make_chain("firewall-1", "waf-1", "webapp-1")
        verdict = evaluate_connection(graph, "firewall-1", "webapp-1")
        assert verdict.risk == WARNING
        assert verdict.message == "Application access without proper authentication controls"

    def test_best_path_wins(self):
        graph = make_graph(
            ["webapp-1", "waf-1", "database-1"],
            [("webapp-1", "database-1"), ("webapp-1", "waf-1"), ("waf-1", "database-1")],
        )
        verdict = evaluate_connection(graph, "webapp-1", "database-1")
        assert len(verdict.paths) == 2
        assert verdict.risk == SECURE

    def test_instances_of_same_type_are_distinct(self):
        graph = make_graph(["server-1", "server-2", "database-1"], [("server-2", "database-1")])
        assert evaluate_connection(graph, "server-1", "database-1").paths == []
        assert evaluate_connection(graph, "server-2", "database-1").paths == [["server-2", "database-1"]]

    def test_type_comes_from_node_not_id(self):
        graph = Graph(nodes=(make_node("n1", "firewall"), make_node("n2", "waf")))
        assert evaluate_connection(graph, "n1", "n2").risk == SECURE

    def test_unknown_source_type(self):
        graph = make_graph(["loadbalancer-1", "switch-1"])
        verdict = evaluate_connection(graph, "loadbalancer-1", "switch-1")
        assert verdict.risk == WARNING
        assert verdict.message == "No specific security rules defined for this connection"

    def test_source_without_rule_ignores_existing_paths(self):
        graph = make_chain("loadbalancer-1", "router-1")
        verdict = evaluate_connection(graph, "loadbalancer-1", "router-1")
        assert verdict.risk == WARNING
        assert verdict.message == "No specific security rules defined for this connection"
        assert verdict.paths == []

    def test_source_without_rule_through_controls_is_still_warning(self):
        # mfa has no rule; the path would otherwise judge secure
        graph = make_chain("mfa-1", "iam-1", "webapp-1")
        assert evaluate_connection(graph, "mfa-1", "webapp-1").risk == WARNING

    def test_source_without_rule_to_control_is_secure(self):
        graph = make_chain("pam-1", "iam-1")
        verdict = evaluate_connection(graph, "pam-1", "iam-1")
        assert verdict.risk == SECURE
        assert verdict.paths == [["pam-1", "iam-1"]]

    def test_missing_nodes_never_raise(self):
        verdict = evaluate_connection(Graph(), "ghost-1", "ghost-2")
        assert verdict.valid is True
        assert verdict.risk == WARNING

    def test_never_rejects(self):
        graph = make_graph(["webapp-1", "database-1"])
        assert evaluate_connection(graph, "webapp-1", "database-1").valid is True


class TestRiskMessage:
    def test_messages(self):
        assert "following security best practices" in risk_message("a", "b", SECURE)
        assert "may need additional security controls" in risk_message("a", "b", WARNING)
        assert "consider adding security controls" in risk_message("a", "b", ConnectionRisk.ERROR)
        assert risk_message("a", "b", ConnectionRisk.OFFLINE) == "Connection status unknown"
