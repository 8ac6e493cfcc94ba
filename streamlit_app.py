# streamlit_app.py
import streamlit as st
import requests, os

API_URL = os.getenv("API_URL", "http://localhost:8000")

st.title("API Source Profiler")

st.markdown("Paste the URL of an API that returns a JSON array of records.")

api_url = st.text_input("API URL")

if st.button("Profile"):
    if not api_url:
        st.error("Please enter an API URL")
    else:
        resp = requests.post(f"{API_URL}/api/source", json={"apiUrl": api_url}, timeout=60)
        try:
            body = resp.json()
        except ValueError:
            st.text(resp.text)
        else:
            if resp.status_code != 200:
                st.error(body.get("message", "request failed"))
                if body.get("error"):
                    st.caption(body["error"])
            else:
                ds = body["dataset"]
                st.write(f"**{ds['row_count']}** rows, **{ds['column_count']}** columns "
                         f"(ingested {ds['ingestion_timestamp']})")
                st.json(body)
