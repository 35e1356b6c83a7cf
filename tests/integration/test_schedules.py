"""Integration tests for scheduled job registration and the entrypoint."""

from datetime import timedelta

import pytest
from unittest.mock import AsyncMock, patch

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from domains.cost_status.errors import ConfigError
from domains.cost_status.types import PublishResult


class TestCostStatusRegistration:
    """Test cost status job registration."""

    def test_job_registered(self, settings, catalog):
        from jobs.cost_status_update import register_cost_status_update, cost_status_update

        scheduler = AsyncIOScheduler()
        register_cost_status_update(scheduler, settings, catalog)

        job = scheduler.get_job("cost_status_update")
        assert job is not None
        assert job.func is cost_status_update
        assert job.args == (settings, catalog)
        assert job.kwargs == {"dry_run": False}

    def test_interval_and_overlap(self, settings, catalog):
        from jobs.cost_status_update import register_cost_status_update

        scheduler = AsyncIOScheduler()
        register_cost_status_update(scheduler, settings, catalog)

        job = scheduler.get_job("cost_status_update")
        assert job.trigger.interval == timedelta(minutes=1)
        assert job.max_instances == settings.max_overlapping_ticks
        assert job.coalesce is False

    def test_dry_run_forwarded(self, settings, catalog):
        from jobs.cost_status_update import register_cost_status_update

        scheduler = AsyncIOScheduler()
        register_cost_status_update(scheduler, settings, catalog, dry_run=True)

        assert scheduler.get_job("cost_status_update").kwargs == {"dry_run": True}


class TestMain:
    """Test the command line entrypoint."""

    def test_config_error_exits_before_scheduling(self):
        import main

        with patch("main.load_settings", side_effect=ConfigError("SLACK_TOKEN environment variable is required")), \
                patch("main.run_forever") as run_forever:
            assert main.main([]) == 1

        run_forever.assert_not_called()

    def test_invalid_catalog_exits(self, settings, catalog_file):
        import main

        path = catalog_file("{broken")
        with patch("main.load_settings", return_value=settings), \
                patch("main.run_forever") as run_forever:
            assert main.main(["--catalog", str(path)]) == 1

        run_forever.assert_not_called()

    def test_once_success(self, settings):
        import main

        tick = AsyncMock(return_value=[PublishResult("work", True)])
        with patch("main.load_settings", return_value=settings), \
                patch("main.cost_status_update", tick):
            assert main.main(["--once"]) == 0

        assert tick.await_args.kwargs == {"dry_run": False}

    @pytest.mark.parametrize("results", [None, [PublishResult("work", False, "invalid_auth")]])
    def test_once_failure(self, settings, results):
        import main

        with patch("main.load_settings", return_value=settings), \
                patch("main.cost_status_update", AsyncMock(return_value=results)):
            assert main.main(["--once", "--dry-run"]) == 1
