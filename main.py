import json
import logging
import sys
import argparse
from typing import Any, Dict, Optional

import yaml

from talent_match.config_loader import AppConfig, load_config
from talent_match.exceptions import EngineException
from talent_match.learning import LearningRecommender, ModuleCatalog
from talent_match.scorer import MatchRanker

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_payload(path: str) -> Dict[str, Any]:
    """Read a YAML or JSON payload with `talent`, `opportunities` and `progress`."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict) or 'talent' not in data:
        raise EngineException(f"Payload {path} must be a mapping with a 'talent' entry")
    return data


def run_matching(config: AppConfig, payload: Dict[str, Any]) -> list:
    ranker = MatchRanker(config.matching)
    matches = ranker.rank(
        payload['talent'],
        payload.get('opportunities') or [],
        result_policy=config.matching.result_policy
    )
    kept = [m for m in matches if ranker.scorer.meets_threshold(m.score)]
    logger.info(f"{len(kept)}/{len(matches)} matches meet the minimum score of "
                f"{config.matching.minimum_match_score}")
    return [m.to_record() for m in kept]


def run_learning(config: AppConfig, payload: Dict[str, Any]) -> list:
    catalog_file = payload.get('catalog_file') or config.learning.catalog_file
    catalog = ModuleCatalog.from_yaml(catalog_file)
    recommender = LearningRecommender(config.learning)
    recommendations = recommender.recommend(payload['talent'], payload.get('progress') or [], catalog)
    return [
        {
            'module_id': r.module_id,
            'title': catalog.get(r.module_id).title,
            'reason': r.reason,
            'rank': r.rank,
        }
        for r in recommendations
    ]


def run(config: AppConfig, payload: Dict[str, Any], mode: str = 'all') -> Dict[str, Any]:
    report: Dict[str, Any] = {}
    if mode in ('all', 'matching'):
        report['matches'] = run_matching(config, payload)
    if mode in ('all', 'learning'):
        report['recommendations'] = run_learning(config, payload)
    return report


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Talent Match Driver")
    parser.add_argument('payload', type=str,
                        help='YAML/JSON file with talent, opportunities and progress')
    parser.add_argument('--mode', type=str, choices=['all', 'matching', 'learning'], default='all',
                        help='What to compute: all (default), matching, or learning')
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to config.yaml')
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        logging.getLogger().setLevel(config.log_level.upper())

        payload = load_payload(args.payload)
        report = run(config, payload, mode=args.mode)
    except EngineException as e:
        logger.error(f"Invalid input: {e}")
        return 2

    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
