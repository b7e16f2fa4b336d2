"""Tests for the scout command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from scout import app

runner = CliRunner()

PETS = [
    "The cat sat on the mat.",
    "The dog played in the park.",
    "Cats and dogs are great pets.",
]


@pytest.fixture
def pets_collection(tmp_path):
    (tmp_path / "pets.json").write_text(json.dumps(PETS))
    path = tmp_path / "collection.json"
    path.write_text(json.dumps({"name": "pets", "source": "pets.json"}))
    return str(path)


@pytest.fixture
def movies_collection(tmp_path):
    movies = [
        {"id": 101, "title": "Cat People", "overview": "A woman fears she turns into a cat."},
        {"id": 102, "title": "Heat", "overview": "A detective hunts a thief."},
    ]
    (tmp_path / "movies.json").write_text(json.dumps(movies))
    path = tmp_path / "collection.json"
    path.write_text(json.dumps({"name": "movies", "source": "movies.json", "fields": ["title", "overview"]}))
    return str(path)


@pytest.mark.unit
class TestTokenizeCommand:
    """Test the tokenize command."""

    def test_prints_shingles(self):
        result = runner.invoke(app, ["tokenize", "hello, everyone"])
        assert result.exit_code == 0
        assert "hel hell hello" in result.output
        assert "27 token(s)" in result.output

    def test_words_option(self):
        result = runner.invoke(app, ["tokenize", "--words", "This is an article"])
        assert result.exit_code == 0
        assert "article" in result.output
        assert "1 token(s)" in result.output

    def test_no_tokens(self):
        result = runner.invoke(app, ["tokenize", "of the"])
        assert result.exit_code == 0
        assert "No tokens produced" in result.output


@pytest.mark.unit
class TestValidateCommand:
    """Test the validate command."""

    def test_passes(self, movies_collection):
        result = runner.invoke(app, ["validate", movies_collection])
        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_fails(self, tmp_path):
        path = tmp_path / "collection.json"
        path.write_text(json.dumps({"name": "broken"}))

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Validation failed" in result.output
        assert "'source'" in result.output


@pytest.mark.unit
class TestIndexCommand:
    """Test the index command."""

    def test_summary_table(self, pets_collection):
        result = runner.invoke(app, ["index", pets_collection])
        assert result.exit_code == 0
        assert "Indexing Summary" in result.output
        assert "Documents" in result.output
        assert "Unique Tokens" in result.output

    def test_record_collection(self, movies_collection):
        result = runner.invoke(app, ["index", movies_collection])
        assert result.exit_code == 0
        assert "References" in result.output

    def test_record_without_id_is_skipped(self, tmp_path):
        movies = [{"title": "Cat People"}, {"id": 2, "title": "Heat"}]
        (tmp_path / "movies.json").write_text(json.dumps(movies))
        path = tmp_path / "collection.json"
        path.write_text(json.dumps({"name": "movies", "source": "movies.json", "fields": ["title"]}))

        result = runner.invoke(app, ["index", str(path)])

        assert result.exit_code == 0
        assert result.exception is None
        assert "Skipping record 1" in result.output
        assert "Indexing Summary" in result.output


@pytest.mark.unit
class TestScoreCommand:
    """Test the score command."""

    def test_scores_term(self, pets_collection):
        result = runner.invoke(app, ["score", pets_collection, "--term", "Cat"])
        assert result.exit_code == 0
        assert "Term Frequency" in result.output
        assert "IDF: 0.4055" in result.output
        assert "TF-IDF: 0.2703" in result.output

    def test_absent_term(self, pets_collection):
        result = runner.invoke(app, ["score", pets_collection, "--term", "zebra"])
        assert result.exit_code == 0
        assert "does not occur" in result.output
        assert "TF-IDF: 0.0000" in result.output

    def test_record_ids_are_documents(self, movies_collection):
        result = runner.invoke(app, ["score", movies_collection, "--term", "cat"])
        assert result.exit_code == 0
        assert "101" in result.output

    def test_term_punctuation_is_stripped(self, pets_collection):
        result = runner.invoke(app, ["score", pets_collection, "--term", "Cat,"])
        assert result.exit_code == 0
        assert '"cat"' in result.output
        assert "TF-IDF: 0.2703" in result.output

    def test_json_output(self, pets_collection):
        result = runner.invoke(app, ["score", pets_collection, "--term", "cat", "--json"])
        assert result.exit_code == 0
        assert '"references"' in result.output
        assert '"document": 3' in result.output
        assert '"position": 1' in result.output
        assert "Term Frequency" not in result.output

    def test_requires_term(self, pets_collection):
        result = runner.invoke(app, ["score", pets_collection])
        assert result.exit_code == 1
        assert "--term is required" in result.output

    def test_empty_collection(self, tmp_path):
        path = tmp_path / "collection.json"
        path.write_text(json.dumps({"name": "gone", "source": "missing.json"}))

        result = runner.invoke(app, ["score", str(path), "--term", "cat"])

        assert result.exit_code == 1
        assert "no indexed documents" in result.output
