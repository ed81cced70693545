"""HTTP layer: request parsing and routers."""
