"""Tests for graphql_defaults.type"""
