# authclient/ui/login.py

import streamlit as st
from authclient.services.api import login_user, register_user


def login_page():
    st.title("🔐 Login")

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def _show_result(result):
    if result["ok"]:
        st.success(f"✅ {result['message']}")
    else:
        st.error(f"❌ {result['message']}")


def show_login_form():
    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in")

    if submitted:
        with st.spinner("Logging in..."):
            _show_result(login_user(username, password))

    if st.button("Create an account"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Register")

    with st.form("register_form"):
        new_user = st.text_input("New username", key="new_user")
        new_pass = st.text_input("New password", type="password", key="new_pass")
        submitted = st.form_submit_button("Register")

    if submitted:
        with st.spinner("Registering..."):
            result = register_user(new_user, new_pass)
        _show_result(result)
        if result["ok"]:
            st.info("You can now log in.")

    if st.button("← Back to login"):
        st.session_state["show_register"] = False
        st.rerun()
