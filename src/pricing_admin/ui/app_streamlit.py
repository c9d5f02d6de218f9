"""
Streamlit UI for the Pricing Admin tool.

Features:
- Product browser with name search and category filter
- Product drill-down listing its variants
- Variant page with the price tier table, add/edit/delete forms
- Quote calculator and CSV export of a variant's tiers
"""
import streamlit as st
import pandas as pd
from datetime import datetime

from pricing_admin.config import get_settings, setup_logging
from pricing_admin.services import CatalogService, PriceTierService, ValidationError, NotFoundError
from pricing_admin.services.display import variant_display_string, format_variant_options, price_tiers_frame
from pricing_admin.store import CatalogStore, load_seed


st.set_page_config(
    page_title="Pricing Admin",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_services():
    """Seed the store once per server process."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    catalog = CatalogService(CatalogStore(load_seed(settings.seed_path)))
    return catalog, PriceTierService(catalog)


try:
    catalog, tiers_service = get_services()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# Navigation state
if 'product_id' not in st.session_state:
    st.session_state.product_id = None
if 'variant_id' not in st.session_state:
    st.session_state.variant_id = None
if 'editing_tier' not in st.session_state:
    st.session_state.editing_tier = None


def go_to(product_id=None, variant_id=None):
    st.session_state.product_id = product_id
    st.session_state.variant_id = variant_id
    st.session_state.editing_tier = None


# ============================================================================
# SIDEBAR: Filters
# ============================================================================
with st.sidebar:
    st.header("🔍 Filters")
    name_filter = st.text_input("Product Name", placeholder="Search by product name...")
    category_options = ["All Categories"] + catalog.list_categories()
    category_choice = st.selectbox("Category", category_options)
    category_filter = None if category_choice == "All Categories" else category_choice

    st.divider()
    if st.button("🏠 All Products", use_container_width=True):
        go_to()
        st.rerun()


st.title("Pricing Admin")
st.caption(f"Browse products and manage pricing tiers | {datetime.now().strftime('%Y-%m-%d')}")


# ============================================================================
# VIEW: Variant detail + price tiers
# ============================================================================
def render_variant(variant_id: str):
    variant = catalog.find_variant_by_id(variant_id)
    if variant is None:
        st.error("Variant not found")
        return

    product = catalog.find_product_by_id(variant.product_id)
    if st.button(f"← Back to {product.name if product else 'product'}"):
        go_to(product_id=variant.product_id)
        st.rerun()

    st.subheader(variant_display_string(variant))
    st.caption("Active" if variant.active else "Inactive")

    tiers = catalog.list_price_tiers_by_variant(variant_id)
    col1, col2 = st.columns([1.8, 1.2], gap="large")

    with col1:
        st.markdown("##### Price Tiers")
        if tiers:
            frame = price_tiers_frame(tiers)
            st.dataframe(
                frame.drop(columns=['ID']),
                use_container_width=True,
                hide_index=True,
                column_config={"Unit Price": st.column_config.NumberColumn("Unit Price", format="$%.4f")},
            )
            st.download_button(
                "📥 CSV",
                data=frame.to_csv(index=False),
                file_name=f"price_tiers_{variant.sku}.csv",
                mime="text/csv",
            )

            for tier in tiers:
                c1, c2, c3 = st.columns([3, 1, 1])
                c1.write(f"{tier.min_qty:,}+ units @ ${tier.price:.4f}")
                if c2.button("✏️ Edit", key=f"edit_{tier.id}"):
                    st.session_state.editing_tier = tier.id
                    st.rerun()
                if c3.button("🗑️ Delete", key=f"delete_{tier.id}"):
                    try:
                        tiers_service.delete(tier.id)
                        st.toast("Price tier deleted successfully!")
                    except NotFoundError as e:
                        st.error(e.message)
                    st.rerun()
        else:
            st.info("No price tiers yet for this variant.")

    with col2:
        editing = catalog.find_price_tier_by_id(st.session_state.editing_tier) if st.session_state.editing_tier else None
        st.markdown("##### " + ("Edit Price Tier" if editing else "Add Price Tier"))
        with st.form("tier_form", clear_on_submit=True):
            min_qty = st.number_input("Minimum Quantity", min_value=1, step=1,
                                      value=editing.min_qty if editing else 1)
            price = st.number_input("Unit Price", min_value=0.0, step=0.01, format="%.4f",
                                    value=editing.price if editing else 0.0)
            submitted = st.form_submit_button("💾 Save", type="primary")

        if submitted:
            try:
                if editing:
                    tiers_service.update(editing.id, {'min_qty': int(min_qty), 'price': float(price)})
                    st.toast("Price tier updated successfully!")
                else:
                    tiers_service.create(variant_id, int(min_qty), float(price))
                    st.toast("Price tier created successfully!")
                st.session_state.editing_tier = None
                st.rerun()
            except (ValidationError, NotFoundError) as e:
                st.error(e.message)

        if editing and st.button("Cancel"):
            st.session_state.editing_tier = None
            st.rerun()

        st.divider()
        st.markdown("##### 🧮 Quote")
        qty = st.number_input("Order Quantity", min_value=1, value=1, step=1, key="quote_qty")
        quote = tiers_service.quote(variant_id, int(qty))
        if quote.tier:
            m1, m2 = st.columns(2)
            m1.metric("Unit Price", f"${quote.unit_price:.4f}")
            m2.metric("Total", f"${quote.extended_price:,.2f}")
            st.caption(f"Tier applies from {quote.tier.min_qty:,} units")
        else:
            st.warning("No tier applies at this quantity")


# ============================================================================
# VIEW: Product detail (variants)
# ============================================================================
def render_product(product_id: str):
    product = catalog.find_product_by_id(product_id)
    if product is None:
        st.error("Product not found")
        return

    if st.button("← All Products"):
        go_to()
        st.rerun()

    st.subheader(product.name)
    st.caption(product.category)

    variants = catalog.list_variants_by_product(product_id)
    if not variants:
        st.info("This product has no variants.")
        return

    for variant in variants:
        with st.container(border=True):
            c1, c2 = st.columns([4, 1])
            c1.markdown(f"**{variant.sku}**" + ("" if variant.active else " :gray[(inactive)]"))
            c1.caption(format_variant_options(variant))
            tier_count = len(catalog.list_price_tiers_by_variant(variant.id))
            if c2.button(f"Manage pricing ({tier_count})", key=f"variant_{variant.id}"):
                go_to(product_id=product_id, variant_id=variant.id)
                st.rerun()


# ============================================================================
# VIEW: Product list
# ============================================================================
def render_products():
    products = catalog.list_products(name=name_filter or None, category=category_filter)
    if not products:
        st.info("No products found. Try adjusting your filters to see more products.")
        return

    summary = pd.DataFrame([
        {'Product': p.name, 'Category': p.category, 'Variants': len(catalog.list_variants_by_product(p.id))}
        for p in products
    ])
    st.caption(f"Total products: {len(catalog.list_products()):,} | Visible: {len(products):,}")

    cols = st.columns(3)
    for i, product in enumerate(products):
        with cols[i % 3]:
            with st.container(border=True):
                st.markdown(f"**{product.name}**")
                st.caption(f"{product.category} · {summary.loc[i, 'Variants']} variants")
                if st.button("Click to view variants and manage pricing", key=f"product_{product.id}"):
                    go_to(product_id=product.id)
                    st.rerun()


if st.session_state.variant_id:
    render_variant(st.session_state.variant_id)
elif st.session_state.product_id:
    render_product(st.session_state.product_id)
else:
    render_products()
