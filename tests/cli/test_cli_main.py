"""
Tests for the command-line interface.
"""

import json

import pytest
import typer
from typer.testing import CliRunner

from autotag.cli.main import app, parse_layer_option
from autotag.core.layer import FeatureString, UPos, feature, misc
from autotag.processing.conllu import load_sentences

runner = CliRunner()


class TestParseLayerOption:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("upos", UPos()),
            ("feature_string", FeatureString()),
            ("feature:Case", feature("Case")),
            ("misc:SpaceAfter", misc("SpaceAfter")),
            ('{"feature": {"feature": "Case", "default": "None"}}', feature("Case", "None")),
        ],
    )
    def test_parses(self, value, expected):
        assert parse_layer_option(value) == expected

    @pytest.mark.parametrize("value", ["pos", "{not json", "upos:Case"])
    def test_rejects(self, value):
        with pytest.raises(typer.BadParameter):
            parse_layer_option(value)


class TestEncodeCommand:
    def test_encode_upos(self, conllu_file):
        result = runner.invoke(app, ["encode", str(conllu_file), "--layer", "upos"])
        assert result.exit_code == 0
        assert result.output == "PROPN\tAUX\tDET\tVERB\nNOUN\tVERB\n"

    def test_encode_to_file(self, conllu_file, tmp_path):
        output = tmp_path / "labels.txt"
        result = runner.invoke(app, ["encode", str(conllu_file), "-l", "feature_string", "-o", str(output)])
        assert result.exit_code == 0
        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines[1] == "_\tPerson=1"

    def test_missing_label_fails(self, conllu_file):
        result = runner.invoke(app, ["encode", str(conllu_file), "--layer", "feature:Case"])
        assert result.exit_code == 1
        assert "est" in result.output

    def test_encode_with_config(self, conllu_file, tmp_path):
        config = tmp_path / "encoders.json"
        config.write_text(
            json.dumps({"encoders": [{"name": "space", "layer": {"misc": {"feature": "SpaceAfter", "default": "Yes"}}}]}),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["encode", str(conllu_file), "--config", str(config), "--name", "space"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "Yes\tYes\tYes\tNo"

    def test_requires_layer(self, conllu_file):
        result = runner.invoke(app, ["encode", str(conllu_file)])
        assert result.exit_code != 0

    def test_layer_and_config_are_exclusive(self, conllu_file, tmp_path):
        config = tmp_path / "encoders.json"
        config.write_text(json.dumps({"encoders": [{"name": "pos", "layer": "upos"}]}), encoding="utf-8")
        result = runner.invoke(
            app, ["encode", str(conllu_file), "--layer", "xpos", "--config", str(config), "--name", "pos"]
        )
        assert result.exit_code == 2

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            json.dumps({"encoders": [{"name": "pos", "layer": "lemma"}]}),
            json.dumps({"encoders": [{"name": "pos"}]}),
        ],
    )
    def test_invalid_config_is_usage_error(self, conllu_file, tmp_path, content):
        config = tmp_path / "encoders.json"
        config.write_text(content, encoding="utf-8")
        result = runner.invoke(app, ["encode", str(conllu_file), "--config", str(config), "--name", "pos"])
        assert result.exit_code == 2
        assert isinstance(result.exception, SystemExit)
        assert "Traceback" not in result.output


class TestDecodeCommand:
    def test_decode_upos(self, conllu_file, tmp_path):
        labels = tmp_path / "labels.txt"
        labels.write_text("NOUN\t\tADJ\tVERB\nNOUN\tAUX\n", encoding="utf-8")
        output = tmp_path / "out.conllu"

        result = runner.invoke(app, ["decode", str(conllu_file), str(labels), "-l", "upos", "-o", str(output)])

        assert result.exit_code == 0
        first, second = load_sentences(output)
        assert [token.upos for token in first] == ["NOUN", "AUX", "ADJ", "VERB"]
        assert [token.upos for token in second] == ["NOUN", "AUX"]

    def test_sentence_count_mismatch(self, conllu_file, tmp_path):
        labels = tmp_path / "labels.txt"
        labels.write_text("NOUN\tAUX\tADJ\tVERB\n", encoding="utf-8")
        result = runner.invoke(app, ["decode", str(conllu_file), str(labels), "-l", "upos"])
        assert result.exit_code == 1

    def test_token_count_mismatch(self, conllu_file, tmp_path):
        labels = tmp_path / "labels.txt"
        labels.write_text("NOUN\tAUX\nNOUN\tAUX\n", encoding="utf-8")
        result = runner.invoke(app, ["decode", str(conllu_file), str(labels), "-l", "upos"])
        assert result.exit_code == 1
        assert "sentence 1" in result.output

    def test_malformed_feature_string(self, conllu_file, tmp_path):
        labels = tmp_path / "labels.txt"
        labels.write_text("_\t_\t_\tCase\n_\t_\n", encoding="utf-8")
        result = runner.invoke(app, ["decode", str(conllu_file), str(labels), "-l", "feature_string"])
        assert result.exit_code == 1

    def test_feature_value_with_separator(self, conllu_file, tmp_path):
        labels = tmp_path / "labels.txt"
        labels.write_text("Nom|Acc\t\t\t\n\t\n", encoding="utf-8")
        output = tmp_path / "out.conllu"
        result = runner.invoke(
            app, ["decode", str(conllu_file), str(labels), "-l", "feature:Case", "-o", str(output)]
        )
        assert result.exit_code == 1
        assert "sentence 1" in result.output
        assert not output.exists()

    def test_decode_keeps_multiword_tokens(self, tmp_path):
        conllu = tmp_path / "in.conllu"
        conllu.write_text(
            "#\n1-2\tdel\t_\t_\t_\t_\t_\t_\t_\t_\n1\tde\t_\t_\t_\t_\t_\t_\t_\t_\n2\tel\t_\t_\t_\t_\t_\t_\t_\t_\n\n",
            encoding="utf-8",
        )
        labels = tmp_path / "labels.txt"
        labels.write_text("ADP\tDET\n", encoding="utf-8")
        result = runner.invoke(app, ["decode", str(conllu), str(labels), "-l", "upos"])
        assert result.exit_code == 0
        assert result.output.splitlines()[:3] == ["#", "1-2\tdel\t_\t_\t_\t_\t_\t_\t_\t_", "1\tde\t_\tADP\t_\t_\t_\t_\t_\t_"]


def test_layers_command():
    result = runner.invoke(app, ["layers"])
    assert result.exit_code == 0
    assert result.output.split() == ["upos", "xpos", "feature", "feature_string", "misc"]
