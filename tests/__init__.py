"""Tests for graphql_defaults"""
