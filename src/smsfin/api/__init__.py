"""HTTP API over the anomaly engine and budget allocator."""
