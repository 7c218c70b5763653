from core.business_hours import display_hours, WeeklySchedule


def test_about_is_none_until_saved(repos):
    assert repos.about.get() is None


def test_about_update_upserts_single_row(repos):
    repos.about.update({"content": "Our story", "years_experience": 10})
    repos.about.update({"content": "New story"})
    about = repos.about.get()
    assert about.content == "New story"
    assert about.years_experience == 10
    assert repos.about.count() == 1


def test_settings_merge_on_update(repos):
    hours = display_hours(WeeklySchedule())
    repos.settings.update({"phone": "+233 1", "business_hours": hours})
    repos.settings.update({"phone": "+233 2"})
    settings = repos.settings.get()
    assert settings["phone"] == "+233 2"
    assert settings["business_hours"]["sunday"] == "closed"


def test_hero_banner_separate_from_business_settings(repos):
    repos.settings.update({"phone": "+233 1"})
    assert repos.hero_banner.get() is None
    repos.hero_banner.update({"title": "Authentic Ghanaian Cuisine", "image_url": "hero/x.jpg"})
    assert repos.hero_banner.get()["title"] == "Authentic Ghanaian Cuisine"
    assert "title" not in repos.settings.get()
