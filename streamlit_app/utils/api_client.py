"""
Recipe gateway access for the Streamlit views.

Every view talks to TheMealDB through the single MealDBConnector returned here.
Controllers catch and log gateway failures themselves, so pages never see
exceptions from this layer.
"""

import requests
import streamlit as st

from finder.connectors.mealdb_connector import MealDBConnector


@st.cache_resource
def get_gateway() -> MealDBConnector:
    """
    Get the process-wide TheMealDB gateway.

    A shared requests.Session keeps connections alive across reruns. The
    gateway holds no recipe data, so sharing it across sessions is safe.
    """
    return MealDBConnector(session=requests.Session())
