"""End-to-end tests for the two-pass analyzer."""

import gc
import json

from componentgraph import AnalysisOptions, SourceFile, UnitKind, analyze_files
from componentgraph.analysis.lexer import MarkupInvocation, Token


def test_five_file_app(sample_records):
    result = analyze_files(sample_records)

    by_id = {node.id: node for node in result.nodes}
    assert list(by_id) == [
        "src/App",
        "src/components/Header",
        "src/components/Footer",
        "src/hooks/useAuth",
        "src/lib/api",
    ]
    assert by_id["src/App"].kind is UnitKind.COMPONENT
    assert by_id["src/hooks/useAuth"].kind is UnitKind.HOOK
    assert by_id["src/lib/api"].kind is UnitKind.UTILITY
    assert by_id["src/lib/api"].exported_names == ["fetchSession", "formatUser"]

    links = [(l.source_unit_id, l.target_unit_id, l.passed_parameter_names) for l in result.links]
    assert links == [
        ("src/App", "src/components/Header", ("user", "onLogout")),
        ("src/App", "src/components/Footer", ("year",)),
        ("src/components/Header", "src/hooks/useAuth", None),
        ("src/hooks/useAuth", "src/lib/api", None),
    ]

    assert [n.degree for n in result.nodes] == [2, 2, 1, 2, 1]


def test_state_slots_and_consumers(sample_records):
    result = analyze_files(sample_records)

    slots = {s.value_name: s for s in result.state_variables}
    assert list(slots) == ["user", "isAdmin"]
    assert slots["user"].owner_unit_id == "src/App"
    assert slots["user"].consumer_unit_ids == {"src/components/Header"}
    assert slots["isAdmin"].owner_display_name == "useAuth"
    assert slots["isAdmin"].consumer_unit_ids == set()


def test_feature_flags(sample_records):
    nodes = {n.display_name: n for n in analyze_files(sample_records).nodes}
    assert nodes["App"].uses_state
    assert not nodes["App"].uses_external_parameters
    assert nodes["Header"].uses_external_parameters
    assert nodes["useAuth"].uses_effectful_lifecycle


def test_deterministic_output(sample_records):
    first = json.dumps(analyze_files(sample_records).to_dict())
    second = json.dumps(analyze_files(sample_records).to_dict())
    assert first == second


def test_unrecognised_files_produce_no_units():
    records = [
        {"path": "src/index.js", "name": "index.js", "content": "console.log('boot');"},
        {"path": "src/A.tsx", "name": "A.tsx", "content": "export const A = () => <B />;"},
        {"path": "src/B.tsx", "name": "B.tsx", "content": "export const B = () => null;"},
    ]
    result = analyze_files(records)
    assert all(node.file_path != "src/index.js" for node in result.nodes)
    assert [n.id for n in result.nodes] == ["src/A", "src/B"]


def test_disconnected_unit_is_pruned():
    records = [
        {"path": "A.tsx", "name": "A.tsx", "content": "export const A = () => <B />;"},
        {"path": "B.tsx", "name": "B.tsx", "content": "export const B = () => null;"},
        {"path": "C.tsx", "name": "C.tsx", "content": "export const C = () => null;"},
    ]
    result = analyze_files(records)
    assert "C" not in {n.id for n in result.nodes}


def test_absent_or_empty_content_is_skipped():
    records = [
        {"path": "A.tsx", "name": "A.tsx"},
        {"path": "B.tsx", "name": "B.tsx", "content": ""},
        SourceFile(path="C.tsx", name="C.tsx", raw_text=""),
    ]
    result = analyze_files(records)
    assert result.is_empty
    assert result.to_dict() == {"nodes": [], "links": [], "stateVariables": []}


def test_colliding_unit_ids_keep_first_file():
    records = [
        {"path": "Button.tsx", "name": "Button.tsx", "content": "export const Button = () => <Icon />;"},
        {"path": "Button.jsx", "name": "Button.jsx", "content": "export const OldButton = () => <Icon />;"},
        {"path": "Icon.tsx", "name": "Icon.tsx", "content": "export const Icon = () => null;"},
    ]
    result = analyze_files(records)
    button = next(n for n in result.nodes if n.id == "Button")
    assert button.display_name == "Button"
    assert len(result.links) == 1


def test_custom_local_prefixes():
    records = [
        {"path": "A.ts", "name": "A.ts",
         "content": "import { helper } from '~/helper';\nexport function useA() { return helper(); }"},
        {"path": "helper.ts", "name": "helper.ts", "content": "export function helper() {}"},
    ]
    assert analyze_files(records).links == []

    result = analyze_files(records, AnalysisOptions(local_prefixes=("~/",)))
    assert [(l.source_unit_id, l.target_unit_id) for l in result.links] == [("A", "helper")]


def test_to_dict_shape(sample_records):
    data = analyze_files(sample_records).to_dict()

    assert set(data) == {"nodes", "links", "stateVariables"}
    assert data["nodes"][0]["displayName"] == "App"
    assert data["nodes"][0]["kind"] == "component"
    assert "passedParameterNames" not in data["links"][2]
    assert data["links"][0]["passedParameterNames"] == ["user", "onLogout"]
    assert data["stateVariables"][0]["consumerUnitIds"] == ["src/components/Header"]


def test_no_token_state_survives_a_run():
    marker = "QxRetainedMarkerValue"
    records = [
        {"path": "A.tsx", "name": "A.tsx",
         "content": f"export const A = () => <B {marker}={{{marker}}} />;"},
        {"path": "B.tsx", "name": "B.tsx", "content": "export const B = () => null;"},
    ]
    result = analyze_files(records)
    assert result.links[0].passed_parameter_names == (marker,)

    del records
    gc.collect()
    leftovers = [
        obj for obj in gc.get_objects()
        if (isinstance(obj, Token) and obj.value == marker)
        or (isinstance(obj, MarkupInvocation) and marker in obj.attributes)
    ]
    assert leftovers == []
