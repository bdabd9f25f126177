"""
Streamlit UI for previewing custom-length prices.

Features:
- Metric or imperial length entry
- Price preview with resolution trace
- Tier table and price curve
- Read-only view of the running configuration

Nothing here writes to Shopify.
"""
import streamlit as st
import pandas as pd
import sys
from pathlib import Path
from datetime import datetime

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from custom_pricing.engine import PricingEngine
from custom_pricing.engine.units import feet_inches_to_meters, round_length
from custom_pricing.config.settings import get_settings


st.set_page_config(
    page_title="Custom Length Pricing",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return PricingEngine()


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


try:
    engine = get_engine()
    settings = get_settings_cached()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


def tier_frame() -> pd.DataFrame:
    """Tier table as a display DataFrame."""
    df = pd.DataFrame(engine.price_tiers())
    return df.rename(columns={
        'range': 'Range (m)',
        'min_m': 'From (m)',
        'max_m': 'To (m)',
        'min_inclusive': 'From inclusive',
        'price': 'Price',
    })


# ============================================================================
# SIDEBAR: Length Entry
# ============================================================================
with st.sidebar:
    st.header("📏 Requested Length")

    with st.container(border=True):
        unit = st.radio("Units", ["Meters", "Feet / Inches"], horizontal=True)

        if unit == "Meters":
            length_m = st.number_input(
                "Length (m)",
                min_value=0.0,
                value=9.0,
                step=0.1,
                format="%.3f",
            )
        else:
            feet = st.number_input("Feet", min_value=0, value=29, step=1)
            inches = st.number_input("Inches", min_value=0.0, max_value=11.99, value=2.0, step=0.5)
            length_m = feet_inches_to_meters(feet, inches)
            st.caption(f"= **{round_length(length_m)} m**")

    st.divider()
    st.caption(f"Supported range: {engine.min_length} – {engine.max_length} m")


# ============================================================================
# MAIN CONTENT: TABBED INTERFACE
# ============================================================================
st.title("Custom Length Pricing")
st.caption(f"Preview only | {datetime.now().strftime('%Y-%m-%d')}")

tab1, tab2, tab3 = st.tabs(["⚡ Price Preview", "📚 Tier Table", "📊 System"])


# ============================================================================
# TAB 1: PRICE PREVIEW
# ============================================================================
with tab1:
    result = engine.compute_price(length_m)

    col1, col2 = st.columns([1.2, 1.8], gap="large")
    with col1:
        if result.ok:
            st.metric("Price", f"${result.price:,.2f}")
            st.metric("Length", f"{round_length(result.length_m)} m")
            st.success(f"Tier {result.tier.label}")
        else:
            st.error(result.error.value)

    with col2:
        with st.expander("🔍 Resolution Details", expanded=True):
            for t in result.trace:
                if t.value:
                    st.caption(f"**{t.step}**: {t.description} = `{t.value}`")
                else:
                    st.caption(f"**{t.step}**: {t.description}")


# ============================================================================
# TAB 2: TIER TABLE
# ============================================================================
with tab2:
    df = tier_frame()
    st.dataframe(
        df,
        hide_index=True,
        use_container_width=True,
        column_config={"Price": st.column_config.NumberColumn(format="$%.2f")},
    )

    # Step curve sampled every 5 cm across the supported range
    samples = pd.DataFrame({'Length (m)': [x / 100 for x in range(550, 1501, 5)]})
    samples['Price'] = samples['Length (m)'].map(lambda x: engine.compute_price(x).price)
    st.line_chart(samples, x='Length (m)', y='Price')


# ============================================================================
# TAB 3: SYSTEM
# ============================================================================
with tab3:
    st.subheader("Configuration")
    st.json({
        "shop": settings.shop or "(unset)",
        "api_version": settings.api_version,
        "variant_policy": settings.variant_policy,
        "variant_id": settings.variant_id,
        "variant_pool_size": len(settings.variant_pool),
        "port": settings.port,
        "cors_strict": settings.cors_strict,
        "origin_patterns": list(settings.origin_patterns),
    })
    st.caption("Admin token is never displayed.")
