"""HTTP routers for the API surface."""
