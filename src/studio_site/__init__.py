"""Backend for the studio marketing site and booking desk."""
