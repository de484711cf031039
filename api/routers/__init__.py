"""HTTP routers, one module per composer operation."""
