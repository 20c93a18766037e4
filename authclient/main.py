# authclient/main.py
# Run with: streamlit run authclient/main.py

from authclient.ui.login import login_page


login_page()
