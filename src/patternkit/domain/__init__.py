"""Domain layer - skeletons, report variants, element families and operations."""
