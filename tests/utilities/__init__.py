"""Tests for graphql_defaults.utilities"""
