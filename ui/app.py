"""
EuroAlt Streamlit UI
- Browse: search, filter and sort the catalogue
- Trust score: breakdown per entry
"""

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from euroalt.config import settings, configure_logging
from euroalt.pipeline import CatalogueBrowser
from euroalt.schemas.alternative import CategoryId, CountryCode, Pricing
from euroalt.schemas.criteria import SearchCriteria, SortBy
from euroalt.domain.text import localized_reservation_text

configure_logging()

st.set_page_config(
    page_title="EuroAlt - European alternatives",
    page_icon="🇪🇺",
    layout="wide",
)

SORT_LABELS = {
    SortBy.NAME.value: "Name",
    SortBy.COUNTRY.value: "Jurisdiction",
    SortBy.CATEGORY.value: "Category",
    SortBy.TRUST_SCORE.value: "Trust score",
}

SEVERITY_ICONS = {"major": "🔴", "moderate": "🟠", "minor": "🟡"}


@st.cache_resource
def get_browser() -> CatalogueBrowser:
    """Catalogue is loaded once per server process"""
    return CatalogueBrowser()


def render_sidebar() -> tuple[SearchCriteria, str]:
    """Filter controls"""
    with st.sidebar:
        st.header("🔍 Filters")

        search_term = st.text_input("Search", value="", placeholder="e.g. mail, Dropbox, encryption")

        categories = st.multiselect(
            "Category", [c.value for c in CategoryId], default=[]
        )
        countries = st.multiselect(
            "Jurisdiction", [c.value for c in CountryCode], default=[],
            format_func=str.upper,
        )
        pricing = st.multiselect("Pricing", [p.value for p in Pricing], default=[])
        open_source_only = st.checkbox("Open source only", value=False)

        st.subheader("⚙️ Display")
        sort_keys = list(SORT_LABELS)
        default_sort = settings.DEFAULT_SORT if settings.DEFAULT_SORT in SORT_LABELS else SortBy.NAME.value
        sort_by = st.selectbox(
            "Sort by", sort_keys,
            index=sort_keys.index(default_sort),
            format_func=SORT_LABELS.get,
        )
        language = st.selectbox(
            "Language", ["en", "de"],
            index=1 if settings.DEFAULT_LANGUAGE.startswith("de") else 0,
        )

    criteria = SearchCriteria(
        search_term=search_term,
        categories=categories,
        countries=countries,
        pricing=pricing,
        open_source_only=open_source_only,
        sort_by=sort_by,
    )
    return criteria, language


def render_card(item, language: str):
    """One catalogue entry"""
    alt = item.alternative

    with st.container(border=True):
        col1, col2 = st.columns([4, 1])

        with col1:
            st.markdown(f"### [{alt.name}]({alt.website})")
            st.caption(f"{alt.country.upper()} · {alt.category} · {alt.pricing}")
            st.write(item.description)
            if alt.replaces_us:
                st.markdown("**Replaces:** " + ", ".join(alt.replaces_us))
            if alt.tags:
                st.caption(" ".join(f"`{t}`" for t in alt.tags))

        with col2:
            st.metric("Trust score", f"{item.effective_score}/10")
            if alt.trust_score_status == "pending":
                st.caption("⏳ pending review")
            elif item.trust.source == "curated":
                st.caption("✅ reviewed")
            if alt.is_open_source:
                st.caption("🔓 open source")
            if alt.self_hostable:
                st.caption("🏠 self-hostable")

        breakdown = item.trust.breakdown
        if breakdown:
            with st.expander("Score breakdown"):
                st.write(f"- Jurisdiction: +{breakdown.jurisdiction}")
                st.write(f"- Openness: +{breakdown.openness}")
                st.write(f"- Privacy signals: +{breakdown.privacy_signals}")
                st.write(f"- Self-hosting: +{breakdown.sovereignty_bonus}")
                st.write(f"- Reservations: -{breakdown.reservation_penalty}")
                if breakdown.us_cap_applied:
                    st.warning("US jurisdiction without self-hosting: capped at 4")

        if alt.reservations:
            with st.expander(f"⚠️ Reservations ({len(alt.reservations)})"):
                for r in alt.reservations:
                    icon = SEVERITY_ICONS.get(r.severity, "🟡")
                    st.write(f"{icon} {localized_reservation_text(r, language)}")

        ready = [v for v in item.vendor_comparisons if v.status == "ready"]
        if ready:
            with st.expander("Compared with US products"):
                for v in ready:
                    st.write(f"- **{v.name}**: {v.trust_score:g}/10 vs {item.effective_score}/10")


def main():
    st.title("🇪🇺 EuroAlt")
    st.subheader("European and open-source alternatives to US tech products")

    criteria, language = render_sidebar()

    try:
        result = get_browser().browse(criteria, language=language)
    except Exception as e:
        st.error(f"Could not load the catalogue: {e}")
        return

    st.caption(f"{result.filtered_count} of {result.total_count} alternatives")

    if not result.items:
        st.info("No alternatives match your current filters. Try adjusting your search or filter criteria.")
        return

    for item in result.items:
        render_card(item, language)


if __name__ == "__main__":
    main()
