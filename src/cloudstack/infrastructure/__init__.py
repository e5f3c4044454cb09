"""Infrastructure layer - wire format handling."""
