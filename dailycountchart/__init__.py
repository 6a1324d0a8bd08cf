"""
Daily count charts: calendar heatmaps of timestamped elements, one grid per year.
"""
