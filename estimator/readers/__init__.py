"""Readers for loading settings and job costs."""

from estimator.readers.profile_reader import ProfileReadError, ProfileReader

__all__ = ["ProfileReadError", "ProfileReader"]
