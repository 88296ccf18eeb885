"""Test suite for jpegmarkers."""
