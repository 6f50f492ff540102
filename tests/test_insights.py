from services.keyword_catalog import SECTION_SYNONYMS


def test_empty_text_yields_zero_insights(scorer):
    insights = scorer.extract_insights("")

    # Splitting empty text yields no words, so the count is 0 (not 1)
    assert insights.word_count == 0
    assert insights.page_estimate == 0
    assert insights.experience_years == 0
    assert insights.skills_count == 0
    assert insights.quantified_achievements == 0
    assert insights.action_verbs_used == 0
    assert insights.contact_info_complete is False
    assert insights.sections_found == []


def test_whitespace_only_text_has_no_words(scorer):
    assert scorer.extract_insights("   \n\t  ").word_count == 0


def test_word_count_and_page_estimate(scorer):
    insights = scorer.extract_insights("word " * 251)
    assert insights.word_count == 251
    assert insights.page_estimate == 2

    assert scorer.extract_insights("word " * 250).page_estimate == 1


def test_experience_years_is_span_of_valid_years(scorer):
    assert scorer.extract_insights("Acme 2015 - 2023").experience_years == 8


def test_experience_years_ignores_out_of_range_years(scorer):
    # 1985 and 2030 fall outside 1990..current year, leaving one valid year
    assert scorer.extract_insights("1985 2010 2030").experience_years == 0
    assert scorer.extract_insights("1989 1990 2024 2025").experience_years == 34


def test_experience_years_needs_two_years(scorer):
    assert scorer.extract_insights("Joined in 2020").experience_years == 0


def test_quantified_achievements_sums_pattern_matches(scorer):
    text = "Increased revenue by 25% and saved $5000 across 3 projects for 12 clients"
    assert scorer.extract_insights(text).quantified_achievements == 4


def test_quantified_achievements_counts_every_occurrence(scorer):
    text = "grew 10% then 20% then 30%; managed 5 people over 2 years"
    # three percentages, one team size, one duration
    assert scorer.extract_insights(text).quantified_achievements == 5


def test_action_verbs_case_insensitive(scorer):
    assert scorer.extract_insights("Managed and LED the team; developed tools").action_verbs_used == 3


def test_skills_count_counts_distinct_terms(scorer):
    text = "python python python docker"
    assert scorer.extract_insights(text).skills_count == 2


def test_contact_info_needs_email_and_phone(scorer):
    assert scorer.extract_insights("jane@mail.com 555-123-4567").contact_info_complete is True
    assert scorer.extract_insights("jane@mail.com").contact_info_complete is False
    assert scorer.extract_insights("555.123.4567").contact_info_complete is False


def test_sections_reported_in_canonical_order(scorer):
    insights = scorer.extract_insights("Awards\nSkills\nExperience")
    assert insights.sections_found == ["experience", "skills", "awards"]


def test_sections_detected_by_synonym(scorer):
    insights = scorer.extract_insights("Employment History\nPortfolio\nHonors")
    assert insights.sections_found == ["experience", "projects", "awards"]


def test_all_sections_in_full_resume(scorer, strong_resume):
    insights = scorer.extract_insights(strong_resume)
    assert insights.sections_found == list(SECTION_SYNONYMS)
    assert insights.contact_info_complete is True
    assert insights.experience_years == 13
    assert insights.quantified_achievements >= 3


def test_quantified_achievements_large_number_suffixes(scorer):
    text = "reached 3 million users, 50k downloads and 2 thousand reviews"
    assert scorer.extract_insights(text).quantified_achievements == 3
