"""Tests for etcd role values."""

from pathlib import Path

import pytest

from src.controlplane.checksums import ChecksumMap
from src.controlplane.models import StoreRole
from src.controlplane.synthesizers import DISABLED_BACKUP, StoreSynthesizer, store_release_name


class TestStoreSynthesizer:
    """Tests for the per-role store synthesizer."""

    @pytest.fixture
    def synthesizer(self, image_resolver, paths) -> StoreSynthesizer:
        return StoreSynthesizer(image_resolver, paths)

    @pytest.fixture
    def backup_values(self) -> dict:
        return {"storageProvider": "S3", "storageContainer": "shoot-backups"}

    def test_main_gets_provider_backup(self, synthesizer, make_context, backup_values) -> None:
        result = synthesizer.synthesize(make_context(), StoreRole.MAIN, backup_values)

        assert result.release_name == "etcd-main"
        assert result.chart_path == Path("/charts/seed-controlplane/charts/etcd")
        assert result.default_values["role"] == "main"
        assert result.default_values["backup"] == backup_values
        assert result.cloud_values is None

    def test_events_backup_is_always_disabled(
        self, synthesizer, make_context, backup_values
    ) -> None:
        result = synthesizer.synthesize(make_context(), StoreRole.EVENTS, backup_values)

        assert result.release_name == "etcd-events"
        assert result.default_values["backup"] == DISABLED_BACKUP

    def test_main_without_backup_has_no_backup_key(self, synthesizer, make_context) -> None:
        result = synthesizer.synthesize(make_context(), StoreRole.MAIN, None)

        assert "backup" not in result.default_values

    def test_backup_values_are_not_shared(self, synthesizer, make_context, backup_values) -> None:
        result = synthesizer.synthesize(make_context(), StoreRole.MAIN, backup_values)
        result.default_values["backup"]["storageProvider"] = "changed"

        assert backup_values["storageProvider"] == "S3"

    def test_images_and_annotations(self, synthesizer, make_context) -> None:
        ctx = make_context(checksums=ChecksumMap({"ca-etcd": "abc"}))

        values = synthesizer.synthesize(ctx, StoreRole.MAIN, None).default_values

        assert values["images"] == {
            "etcd": "quay.io/coreos/etcd:v3.3.10",
            "etcd-backup-restore": "eu.gcr.io/gardener/etcdbrctl:0.4.1",
        }
        assert values["podAnnotations"] == {"checksum/secret-etcd-ca": "abc"}


def test_store_release_name() -> None:
    assert store_release_name(StoreRole.EVENTS) == "etcd-events"
