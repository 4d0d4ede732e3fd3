"""Services around the generator."""

from services.rf_data_client import fetch_configured_rf_data, fetch_rf_data, fetch_remote_rf_data

__all__ = ["fetch_configured_rf_data", "fetch_remote_rf_data", "fetch_rf_data"]
