"""Map components: base layers, overlays and the depth legend."""
