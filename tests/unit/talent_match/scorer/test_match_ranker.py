#!/usr/bin/env python3
"""
Unit tests for MatchRanker - filtering, ordering, deduplication and ResultPolicy.
"""

import unittest
from datetime import datetime, timezone

from talent_match.config_loader import ResultPolicy
from talent_match.scorer import MatchRanker
from tests.fixtures.engine_fixtures import make_opportunity, make_talent


def day(n):
    return datetime(2026, 9, n, tzinfo=timezone.utc)


class TestMatchRanker(unittest.TestCase):

    def setUp(self):
        self.ranker = MatchRanker()
        self.talent = make_talent()

    def test_sorted_by_score_desc(self):
        opps = [
            make_opportunity(id="far", required_role_level="L8", store_tier="T5"),
            make_opportunity(id="close"),
            make_opportunity(id="middle", store_tier="T4"),
        ]
        ranked = self.ranker.rank(self.talent, opps)
        self.assertEqual([m.opportunity_id for m in ranked], ["close", "middle", "far"])
        scores = [m.score for m in ranked]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_inactive_opportunities_filtered(self):
        opps = [
            make_opportunity(id="live", status="active"),
            make_opportunity(id="draft", status="draft"),
            make_opportunity(id="paused", status="paused"),
            make_opportunity(id="filled", status="filled"),
        ]
        ranked = self.ranker.rank(self.talent, opps)
        self.assertEqual([m.opportunity_id for m in ranked], ["live"])

    def test_ties_broken_by_recency_then_id(self):
        opps = [
            make_opportunity(id="b-old", published_at=day(1)),
            make_opportunity(id="undated", published_at=None, created_at=None),
            make_opportunity(id="c-new", published_at=day(20)),
            make_opportunity(id="a-new", published_at=day(20)),
            make_opportunity(id="created", published_at=None, created_at=day(10)),
        ]
        ranked = self.ranker.rank(self.talent, opps)
        self.assertEqual(len({m.score for m in ranked}), 1)
        self.assertEqual(
            [m.opportunity_id for m in ranked],
            ["a-new", "c-new", "created", "b-old", "undated"],
        )

    def test_naive_and_aware_timestamps_mix(self):
        opps = [
            make_opportunity(id="naive", published_at=datetime(2026, 9, 2)),
            make_opportunity(id="aware", published_at=day(1)),
        ]
        ranked = self.ranker.rank(self.talent, opps)
        self.assertEqual([m.opportunity_id for m in ranked], ["naive", "aware"])

    def test_duplicates_collapse(self):
        opps = [make_opportunity(id="dup"), make_opportunity(id="dup"), make_opportunity(id="other", store_tier="T5")]
        ranked = self.ranker.rank(self.talent, opps)
        self.assertEqual([m.opportunity_id for m in ranked], ["dup", "other"])

    def test_order_independent(self):
        opps = [make_opportunity(id=f"o{i}", store_tier=f"T{(i % 5) + 1}") for i in range(8)]
        forward = self.ranker.rank(self.talent, opps)
        backward = self.ranker.rank(self.talent, list(reversed(opps)))
        self.assertEqual([m.to_record() for m in forward], [m.to_record() for m in backward])

    def test_result_policy(self):
        opps = [
            make_opportunity(id="close"),
            make_opportunity(id="middle", store_tier="T4"),
            make_opportunity(id="far", required_role_level="L8", store_tier="T5", division="beauty"),
        ]
        top_one = self.ranker.rank(self.talent, opps, result_policy=ResultPolicy(top_k=1))
        self.assertEqual([m.opportunity_id for m in top_one], ["close"])

        all_scores = {m.opportunity_id: m.score for m in self.ranker.rank(self.talent, opps)}
        floor = all_scores["middle"]
        gated = self.ranker.rank(self.talent, opps, result_policy=ResultPolicy(min_score=floor))
        self.assertEqual([m.opportunity_id for m in gated], ["close", "middle"])

    def test_empty(self):
        self.assertEqual(self.ranker.rank(self.talent, []), [])


class TestRankTalents(unittest.TestCase):

    def setUp(self):
        self.ranker = MatchRanker()

    def test_ranks_talents_for_opportunity(self):
        talents = [
            make_talent(id="t-junior", current_role_level="L1", target_role_levels=set(), years_in_luxury=1),
            make_talent(id="t-fit"),
            make_talent(id="t-fit"),
            make_talent(id="t-twin"),
        ]
        ranked = self.ranker.rank_talents(make_opportunity(), talents)
        self.assertEqual([m.talent_id for m in ranked], ["t-fit", "t-twin", "t-junior"])

    def test_inactive_opportunity_ranks_nobody(self):
        ranked = self.ranker.rank_talents(make_opportunity(status="cancelled"), [make_talent()])
        self.assertEqual(ranked, [])


if __name__ == '__main__':
    unittest.main(verbosity=2)
