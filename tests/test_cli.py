"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from gql_fluent.cli import main

MUTATION = {
    "type": "mutation",
    "fields": [
        {
            "name": "createQuestion",
            "arguments": [
                {
                    "name": "input",
                    "kind": "object",
                    "arguments": [{"name": "title", "value": "what"}],
                }
            ],
            "fields": [{"name": "question", "fields": ["id"]}],
        }
    ],
}
RENDERED = 'mutation{createQuestion(input:{title:"what"}){question{id}}}'


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def document(tmp_path):
    path = tmp_path / "mutation.json"
    path.write_text(json.dumps(MUTATION))
    return path


class TestRenderCommand:
    """Tests for `gql-fluent render`."""

    def test_render_file(self, runner, document):
        result = runner.invoke(main, ["render", str(document)])
        assert result.exit_code == 0
        assert result.output == RENDERED + "\n"

    def test_render_stdin(self, runner):
        result = runner.invoke(main, ["render", "-"], input=json.dumps(MUTATION))
        assert result.exit_code == 0
        assert result.output.strip() == RENDERED

    def test_json_body(self, runner, document):
        result = runner.invoke(main, ["render", "--json", str(document)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"query": RENDERED}

    def test_output_file(self, runner, document, tmp_path):
        out = tmp_path / "out" / "query.graphql"
        result = runner.invoke(main, ["render", str(document), "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text() == RENDERED + "\n"

    def test_invalid_description(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"type": "delete"}))
        result = runner.invoke(main, ["render", str(path)])
        assert result.exit_code == 1
        assert "Invalid document description" in result.output

    def test_invalid_operation_name(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"name": "1", "fields": ["id"]}))
        result = runner.invoke(main, ["render", str(path)])
        assert result.exit_code == 1
        assert "invalid operation name" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["render", str(tmp_path / "nope.json")])
        assert result.exit_code == 2

    def test_check_rejects_invalid_names(self, runner, tmp_path):
        path = tmp_path / "dgraph_names.json"
        path.write_text(json.dumps({"fields": [{"name": "name@en"}]}))
        result = runner.invoke(main, ["render", "--check", str(path)])
        assert result.exit_code == 1
        assert "invalid field name" in result.output

    def test_no_check_renders_unvalidated_tree(self, runner, tmp_path):
        path = tmp_path / "dgraph_names.json"
        path.write_text(json.dumps({"name": "1", "fields": [{"name": "name@en"}]}))
        result = runner.invoke(main, ["render", "--no-check", str(path)])
        assert result.exit_code == 0
        assert result.output == "query 1{name@en}\n"

    def test_no_check_json_body(self, runner, tmp_path):
        path = tmp_path / "dgraph_names.json"
        path.write_text(json.dumps({"fields": [{"name": "name@en"}]}))
        result = runner.invoke(main, ["render", "--no-check", "--json", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"query": "query{name@en}"}
