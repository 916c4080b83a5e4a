"""Tests for graphql_defaults.pyutils"""
