"""Line Counter: comment-aware source line counting."""
