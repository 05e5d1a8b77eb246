"""Analysis components: scanning, statistics, correlation and missingness."""
