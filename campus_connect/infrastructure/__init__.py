"""Infrastructure layer: MongoDB persistence and the media upload signer."""
