"""jtops - operational utilities for the job-tracker deployment."""
