"""FZ Scripts: community script sharing API."""
