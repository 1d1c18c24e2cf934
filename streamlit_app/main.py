"""Streamlit user management front-end"""
import asyncio
import streamlit as st
from utils.api_client import api_client, APIError

ROLES = ["User", "Admin"]

st.set_page_config(
    page_title="User Manager",
    page_icon="👥",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def _run_async(coro):
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None
    if loop and loop.is_running():
        new_loop = asyncio.new_event_loop()
        try:
            return new_loop.run_until_complete(coro)
        finally:
            new_loop.close()
    return asyncio.run(coro)


def _report(action: str, call) -> bool:
    """Run an API call, showing the server's error detail on failure"""
    try:
        _run_async(call)
    except APIError as e:
        st.error(f"{action} failed: {e.detail}")
        return False
    except Exception as e:
        st.error(f"{action} failed: {e}")
        return False
    st.success(f"{action} succeeded")
    return True


st.title("👥 User Manager")

col_form, col_list = st.columns([1, 2])

with col_form:
    st.subheader("Add User")
    with st.form("create_user", clear_on_submit=True):
        name = st.text_input("Name")
        email = st.text_input("Email")
        role = st.selectbox("Role", ROLES, index=0)
        submitted = st.form_submit_button("Add", type="primary")
    if submitted:
        _report("Create", api_client.create_user(name, email, role))

    st.subheader("Edit User")
    with st.form("update_user"):
        user_id = st.number_input("User ID", min_value=1, step=1)
        new_name = st.text_input("Name")
        new_email = st.text_input("Email")
        new_role = st.selectbox("Role", ROLES, index=0)
        submitted_update = st.form_submit_button("Save")
    if submitted_update:
        _report("Update", api_client.update_user(int(user_id), new_name, new_email, new_role))

    st.subheader("Delete User")
    with st.form("delete_user"):
        delete_user_id = st.number_input("User ID to delete", min_value=1, step=1)
        submitted_delete = st.form_submit_button("Delete")
    if submitted_delete:
        _report("Delete", api_client.delete_user(int(delete_user_id)))

with col_list:
    st.subheader("Users")
    if st.button("Refresh"):
        st.rerun()
    try:
        users = _run_async(api_client.list_users())
        if users:
            st.dataframe(users, use_container_width=True, hide_index=True)
        else:
            st.info("No users yet.")
    except Exception as e:
        st.error(f"Failed to load users: {e}")
