"""Command-line front ends for the pwgen generators."""
