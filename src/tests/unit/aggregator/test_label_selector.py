"""Tests for label selector translation."""

import pytest

from shared.models import CatalogEntity
from workload_aggregator.services import match_labels_from_entity, parse_label_selector


class TestParseLabelSelector:
    @pytest.mark.parametrize("match_labels", [None, {}])
    def test_absent_or_empty(self, match_labels):
        assert parse_label_selector(match_labels) == ""

    def test_single_label(self):
        assert parse_label_selector({"app": "foo"}) == "app=foo"

    def test_key_order_preserved(self):
        assert parse_label_selector({"app": "foo", "tier": "web"}) == "app=foo,tier=web"
        assert parse_label_selector({"tier": "web", "app": "foo"}) == "tier=web,app=foo"

    def test_values_passed_verbatim(self):
        """No escaping is applied."""
        selector = parse_label_selector({"app.kubernetes.io/name": "a,b", "env": "x=y"})

        assert selector == "app.kubernetes.io/name=a,b,env=x=y"


class TestMatchLabelsFromEntity:
    def test_reads_kubernetes_selector(self, entity_data):
        entity = CatalogEntity(**entity_data)

        assert match_labels_from_entity(entity) == {"app": "checkout", "tier": "web"}

    def test_missing_kubernetes_block(self):
        entity = CatalogEntity(metadata={"name": "checkout"}, spec={"type": "service"})

        assert match_labels_from_entity(entity) is None

    def test_selector_without_match_labels(self):
        entity = CatalogEntity(spec={"kubernetes": {"selector": {}}})

        assert match_labels_from_entity(entity) is None

    def test_no_entity(self):
        assert match_labels_from_entity(None) is None

    @pytest.mark.parametrize(
        "spec",
        [
            {"kubernetes": "enabled"},
            {"kubernetes": {"selector": "app=checkout"}},
            {"kubernetes": {"selector": {"matchLabels": ["app", "checkout"]}}},
            {"kubernetes": None},
        ],
    )
    def test_unexpected_shapes_yield_no_selector(self, spec):
        entity = CatalogEntity(spec=spec)

        assert match_labels_from_entity(entity) is None
        assert parse_label_selector(match_labels_from_entity(entity)) == ""
