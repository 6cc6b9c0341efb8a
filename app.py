"""Streamlit search page for Namespace Search.

Run the API first (``namespace-search serve``), then ``streamlit run app.py``.
"""

import requests
import streamlit as st

from namespace_search.config import settings

API_URL = settings.search_api_url.rstrip("/")
REQUEST_TIMEOUT = settings.request_timeout

st.set_page_config(
    page_title="Namespace Search",
    page_icon="🔎",
    layout="wide",
)

st.markdown("""
<style>
    .result-box {
        background-color: #111827;
        color: #e5e7eb;
        border-left: 4px solid #3b82f6;
        padding: 0.75rem 1rem;
        margin-bottom: 0.75rem;
        border-radius: 0 5px 5px 0;
    }
    .result-box a { color: #60a5fa; }
</style>
""", unsafe_allow_html=True)

st.title("🔎 Namespace Search")


def _error_message(response: requests.Response) -> str:
    try:
        return response.json().get("error", response.text)
    except ValueError:
        return response.text or f"HTTP {response.status_code}"


@st.cache_data(ttl=60)
def load_namespaces() -> dict:
    """Fetch namespaces and record counts from the API."""
    response = requests.get(f"{API_URL}/namespaces", timeout=REQUEST_TIMEOUT)
    if response.status_code != 200:
        raise RuntimeError(_error_message(response))
    return response.json()


def run_search(query: str, namespace: str) -> dict:
    response = requests.post(
        f"{API_URL}/search",
        json={"query": query, "namespace": namespace},
        timeout=REQUEST_TIMEOUT,
    )
    if response.status_code != 200:
        raise RuntimeError(_error_message(response))
    return response.json()


# Sidebar: namespace directory
with st.sidebar:
    st.markdown("### 📂 Namespaces")
    try:
        directory = load_namespaces()
    except (requests.RequestException, RuntimeError) as e:
        directory = None
        st.error("Could not load namespaces")
        st.code(str(e))

    if directory and directory["count"]:
        stats = directory["namespaceStats"]
        selected = st.radio(
            "Search in",
            directory["namespaces"],
            format_func=lambda name: f"{name} ({stats.get(name, 0)})",
        )
    else:
        selected = None
        if directory is not None:
            st.info("The index has no namespaces yet.")

    if st.button("Refresh", use_container_width=True):
        load_namespaces.clear()
        st.rerun()

# Search form
with st.form("search"):
    query = st.text_input("Query", placeholder=f"Search {selected or 'a namespace'}...")
    submitted = st.form_submit_button("Search", disabled=not selected)

if submitted:
    if not query.strip():
        st.warning("Enter a query to search.")
    else:
        with st.spinner(f"Searching '{selected}'..."):
            try:
                data = run_search(query, selected)
            except (requests.RequestException, RuntimeError) as e:
                st.error(f"Error: {e}")
            else:
                st.caption(f"{data['count']} results for “{data['query']}” in {data['namespace']}")
                for fragment in data["results"]:
                    st.markdown(f'<div class="result-box">{fragment}</div>', unsafe_allow_html=True)
