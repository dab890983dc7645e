"""Alert validation, extraction and dispatch services."""
