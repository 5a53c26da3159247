from __future__ import annotations
import streamlit as st
import pandas as pd
import numpy as np
from typing import List
import matplotlib.pyplot as plt
import io

from summary_assistant.config import SummaryLength, SummaryOptions, DEFAULT_SUMMARIZER_CONFIG
from summary_assistant.datatypes import FrequencyTable, ScoredSentence
from summary_assistant.summarize import summarize, choose_sentence_count, select_top_sentences
from summary_assistant.preprocessing import tokenize, split_sentences
from summary_assistant.features import word_freq, top_keywords
from summary_assistant.scoring import score_sentences
from summary_assistant.readability import readability
from summary_assistant.suggestions import count_passive_voice, count_heading_lines, count_bullet_lines
from summary_assistant.loaders import ExtractionError, SUPPORTED_EXTENSIONS, human_size, load_text_from_file

def preview(text: str, limit: int = 80) -> str:
    return text[:limit] + "..." if len(text) > limit else text

def draw_keyword_chart(freq: FrequencyTable, keywords: List[str]):
    """Bar chart of the top keywords by frequency."""
    fig, ax = plt.subplots(figsize=(8, 4))
    counts = [freq[k] for k in keywords]
    ax.barh(keywords[::-1], counts[::-1], color='lightblue', edgecolor='gray')
    ax.set_title("Top Keywords", fontsize=14, fontweight='bold')
    ax.set_xlabel("Frequency")
    plt.tight_layout()

    # Convert plot to image for Streamlit
    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls():
    """Create sidebar controls for summary options."""
    st.sidebar.header("Summary Options")
    length = st.sidebar.selectbox(
        "Summary length",
        options=[m.value for m in SummaryLength],
        index=1,
        help="Short ≈ 6%, medium ≈ 12%, long ≈ 22% of the sentences (3 to 20)"
    )
    include_bullets = st.sidebar.checkbox("Include bullet points", value=True)
    include_keywords = st.sidebar.checkbox("Include keywords", value=True)
    include_suggestions = st.sidebar.checkbox("Include improvement suggestions", value=True)

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=False, help="Show detailed pipeline steps")

    options = SummaryOptions(
        length=SummaryLength(length),
        include_bullets=include_bullets,
        include_keywords=include_keywords,
        include_suggestions=include_suggestions,
    )
    return options, debug_mode

def show_scoring(scored: List[ScoredSentence], chosen: List[ScoredSentence]):
    selected_idx = {s.index for s in chosen}
    scoring_df = pd.DataFrame([
        {
            "Sentence #": s.index + 1,
            "Score": round(s.score, 3),
            "Selected": "✅" if s.index in selected_idx else "❌",
            "Text Preview": preview(s.text),
        }
        for s in scored
    ])
    st.dataframe(scoring_df, use_container_width=True)

    scores = np.array([s.score for s in scored])
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Min Score", f"{scores.min():.3f}")
    with col2:
        st.metric("Max Score", f"{scores.max():.3f}")
    with col3:
        st.metric("Mean Score", f"{np.mean(scores):.3f}")
    with col4:
        st.metric("Std Score", f"{np.std(scores):.3f}")

def debug_pipeline(text: str, options: SummaryOptions):
    """Show every pipeline stage for the given text."""

    # Step 1: Segmentation and tokenization
    st.header("🔧 Step 1: Segmentation & Tokenization")
    with st.expander("Pre-processing Details", expanded=True):
        sentences = split_sentences(text)
        tokens = tokenize(text)
        freq = word_freq(tokens)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Total Sentences", len(sentences))
            st.metric("Total Words (original)", len(text.split()))
        with col2:
            st.metric("Total Tokens", len(tokens))
            st.metric("Stopwords Removed", len(tokens) - sum(freq.values()))
        with col3:
            st.metric("Unique Terms", len(freq))

        freq_df = pd.DataFrame(
            [{"Term": term, "Frequency": count}
             for term, count in sorted(freq.items(), key=lambda x: x[1], reverse=True)]
        )
        st.dataframe(freq_df, use_container_width=True, height=200)

    if not sentences:
        st.warning("No sentences detected")
        return

    # Step 2: Sentence scoring and selection
    st.header("🎯 Step 2: Sentence Scoring & Selection")
    with st.expander("Scoring Details", expanded=True):
        scored = score_sentences(sentences, freq)
        n = choose_sentence_count(len(sentences), options.length)
        chosen = select_top_sentences(scored, options.length, n=n)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Target Sentences", n)
        with col2:
            st.metric("Actually Selected", len(chosen))
        with col3:
            st.metric("Actual Ratio", f"{len(chosen) / len(sentences):.2%}")
        show_scoring(scored, chosen)

    # Step 3: Keywords
    st.header("🔑 Step 3: Keywords")
    with st.expander("Keyword Details", expanded=True):
        keywords = top_keywords(freq, DEFAULT_SUMMARIZER_CONFIG.keyword_limit)
        if keywords:
            st.image(draw_keyword_chart(freq, keywords), caption="Keyword frequency")
        else:
            st.warning("No keywords found (text has no non-stopword terms)")

    # Step 4: Readability and structure
    st.header("📊 Step 4: Readability & Structure")
    with st.expander("Readability Details", expanded=True):
        r = readability(text)
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Flesch Reading Ease", f"{r.fre:.1f}")
            st.metric("Passive Voice Hits", count_passive_voice(text))
        with col2:
            st.metric("Avg Sentence Length", f"{r.asl:.1f}")
            st.metric("Heading Lines", count_heading_lines(text))
        with col3:
            st.metric("Avg Syllables / Word", f"{r.asw:.2f}")
            st.metric("Bullet Lines", count_bullet_lines(text))

def main():
    st.title("Document Summary Assistant")
    st.write("Upload a text document or paste text to get a summary, keywords and readability advice")

    # Sidebar controls
    options, debug_mode = create_sidebar_controls()

    # A new widget key clears both the upload and the text area
    st.session_state.setdefault("input_generation", 0)
    generation = st.session_state["input_generation"]

    # File upload
    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=list(SUPPORTED_EXTENSIONS),
        help="Upload a text file to summarize (supports .txt, .rtf, .md formats)",
        key=f"upload_{generation}",
    )

    text = ""
    if uploaded_file is not None:
        st.caption(
            f"Name: {uploaded_file.name} | Type: {uploaded_file.type or 'n/a'} | "
            f"Size: {human_size(uploaded_file.size)}"
        )
        try:
            text = load_text_from_file(uploaded_file)
        except ExtractionError as e:
            st.error(str(e))
    source = uploaded_file.name if uploaded_file is not None else ""
    text = st.text_area("Extracted text", text, height=200, key=f"text_{generation}_{source}")

    col1, col2 = st.columns([1, 5])
    with col2:
        if st.button("Reset"):
            st.session_state["input_generation"] = generation + 1
            st.rerun()
    with col1:
        run = st.button("Summarize", type="primary", disabled=not text.strip())

    if run:
        result = summarize(text, options)
        if result.is_empty:
            st.error(result.notice)
            return

        if debug_mode:
            st.markdown("---")
            st.title("🔍 Pipeline Debug Mode")
            debug_pipeline(text, options)

        # Final summary display
        st.markdown("---")
        st.header("📋 Summary")
        st.text_area("Generated Summary", result.summary_text, height=300)
        st.download_button("Download", result.summary_text, file_name="summary.txt", mime="text/plain")

        # Display statistics
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Original Length", len(text.split()))
        with col2:
            st.metric("Summary Length", len(result.summary.split()))
        with col3:
            compression = len(result.summary.split()) / len(text.split())
            st.metric("Actual Compression", f"{compression:.2%}")

if __name__ == "__main__":
    main()
