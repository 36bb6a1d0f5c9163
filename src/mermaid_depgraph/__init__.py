"""Render file dependency graphs as directory-grouped Mermaid flowcharts."""
