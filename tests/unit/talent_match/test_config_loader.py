import unittest
import os
import yaml
from unittest.mock import patch, mock_open

from pydantic import ValidationError

from talent_match.config_loader import (
    load_config, AppConfig, DimensionWeights, LearningConfig, ScorerConfig
)
from talent_match.exceptions import ConfigurationError
from talent_match.models import Difficulty, RoleLevel


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "log_level": "DEBUG",
            "matching": {
                "minimum_match_score": 55,
                "scorer": {
                    "role_level_step": 0.3,
                    "weights": {
                        "role_level_fit": 0.30,
                        "store_tier_fit": 0.10,
                        "division_overlap": 0.10,
                        "experience_fit": 0.15,
                        "location_fit": 0.10,
                        "timeline_fit": 0.10,
                        "assessment_fit": 0.15,
                    },
                },
                "result_policy": {"top_k": 10},
            },
            "learning": {"gap_threshold": 3.0},
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config_default(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertIsInstance(config, AppConfig)
                self.assertEqual(config.log_level, "DEBUG")
                self.assertEqual(config.matching.minimum_match_score, 55)
                self.assertEqual(config.matching.scorer.weights.role_level_fit, 0.30)
                self.assertEqual(config.matching.scorer.role_level_step, 0.3)
                self.assertEqual(config.matching.result_policy.top_k, 10)
                self.assertEqual(config.learning.gap_threshold, 3.0)
                # untouched sections keep their defaults
                self.assertEqual(config.matching.compensation.tolerance_fraction, 0.10)
                self.assertEqual(config.learning.max_recommendations, 3)

    def test_empty_file_gives_defaults(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy")
                self.assertEqual(config, AppConfig())

    def test_env_var_override_log_level(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.log_level, "WARNING")

    def test_env_var_override_catalog_file(self):
        with patch("builtins.open", mock_open(read_data=yaml.dump({"log_level": "INFO"}))):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"LEARNING_CATALOG_FILE": "/srv/modules.yaml"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.learning.catalog_file, "/srv/modules.yaml")

    def test_bad_weights_raise_configuration_error(self):
        bad = yaml.dump({"matching": {"scorer": {"weights": {"role_level_fit": 0.9}}}})
        with patch("builtins.open", mock_open(read_data=bad)):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ConfigurationError):
                    load_config("dummy")

    def test_unknown_difficulty_raises_configuration_error(self):
        bad = yaml.dump({"learning": {"role_level_difficulty": {"L3": "expert"}}})
        with patch("builtins.open", mock_open(read_data=bad)):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ConfigurationError):
                    load_config("dummy")

    def test_unknown_role_level_raises_configuration_error(self):
        bad = yaml.dump({"learning": {"role_level_difficulty": {"L12": "beginner"}}})
        with patch("builtins.open", mock_open(read_data=bad)):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ConfigurationError):
                    load_config("dummy")

    def test_difficulty_mapping_parsed(self):
        data = yaml.dump({"learning": {"role_level_difficulty": {"L1": "intermediate"}, "default_difficulty": "advanced"}})
        with patch("builtins.open", mock_open(read_data=data)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy")
                self.assertEqual(config.learning.role_level_difficulty, {RoleLevel.L1: Difficulty.INTERMEDIATE})
                self.assertEqual(config.learning.default_difficulty, Difficulty.ADVANCED)

    def test_repo_config_file_loads(self):
        path = os.path.join(os.path.dirname(__file__), "..", "..", "..", "config.yaml")
        config = load_config(path)
        self.assertEqual(config.matching.scorer.weights, DimensionWeights())
        self.assertEqual(config.learning.gap_threshold, 3.5)


class TestDimensionWeights(unittest.TestCase):

    def test_defaults_sum_to_one(self):
        self.assertAlmostEqual(sum(DimensionWeights().model_dump().values()), 1.0)

    def test_seven_dimensions(self):
        self.assertEqual(len(DimensionWeights().model_dump()), 7)

    def test_sum_must_be_one(self):
        with self.assertRaises(ValidationError):
            DimensionWeights(role_level_fit=0.5)

    def test_negative_weight_rejected(self):
        with self.assertRaises(ValidationError):
            DimensionWeights(role_level_fit=0.45, store_tier_fit=-0.10)


class TestPolicyDefaults(unittest.TestCase):

    def test_policy_constants(self):
        self.assertEqual(LearningConfig().gap_threshold, 3.5)
        self.assertEqual(LearningConfig().max_recommendations, 3)
        self.assertEqual(ScorerConfig().neutral_score, 0.5)
        self.assertEqual(ScorerConfig().location.same_region, 0.6)
        self.assertEqual(ScorerConfig().timeline.not_looking, 0.1)


if __name__ == '__main__':
    unittest.main()
