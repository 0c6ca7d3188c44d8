from .stores import ActivityStoreFake, ReportStoreFake, TelemetryStoreFake

__all__ = ["ActivityStoreFake", "ReportStoreFake", "TelemetryStoreFake"]
