"""Library domain module: novels, chapters and their authors."""
