"""Tests for demo data seeding"""

import json

import yaml

from src.infrastructure.sample_data import sample_files, seed_sample_data


class TestSeedSampleData:

    def test_seed_empty_root(self, tmp_path):
        root = tmp_path / "data"

        written = seed_sample_data(root)

        assert written == len(sample_files())
        assert (root / "test_pipeline_results" / "job_12345" / "test_summary.log").is_file()
        assert (root / "reports" / "daily" / "2024-01-15.html").is_file()
        assert (root / "logs" / "error.log").is_file()

    def test_non_empty_root_untouched(self, data_root):
        assert seed_sample_data(data_root) == 0
        assert not (data_root / "logs").exists()

    def test_force(self, data_root):
        assert seed_sample_data(data_root, force=True) == len(sample_files())
        assert (data_root / "logs").is_dir()
        assert (data_root / "b.txt").read_text() == "bee"

    def test_deterministic(self):
        assert sample_files() == sample_files()

    def test_structured_files_parse(self):
        files = sample_files()

        config = json.loads(files["config/config.json"])
        assert config["environment"] == "staging"
        assert yaml.safe_load(files["config/pipeline.yml"])
