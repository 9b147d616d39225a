"""ui — Small pygame drawing helpers shared by scenes."""
