"""Tests for graphql_defaults.language"""
