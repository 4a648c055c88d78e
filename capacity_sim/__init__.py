"""Biophysical capacity/fatigue model with a closed-form validation harness."""
