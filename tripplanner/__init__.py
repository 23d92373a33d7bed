# tripplanner/__init__.py

"""
TripPlanner: weather, photos and an encyclopedia summary for a destination.

Contains:
- main.py       : FastAPI relay (provider pass-through + aggregate search)
- app.py        : Streamlit results view
- aggregator.py : concurrent search across the three providers
- resolver.py   : two-stage Wikipedia summary lookup
- landmarks.py  : photo caption heuristics
- providers.py  : OpenWeatherMap / Unsplash / Wikipedia clients
"""
