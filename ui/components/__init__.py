"""
UI components.

- charts: Plotly figures for comparison reports
"""
