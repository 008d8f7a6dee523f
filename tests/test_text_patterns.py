"""Tests for regex-based source extraction."""

from textwrap import dedent

from pkgscope.text_patterns import (
    MORPH_TO_SENTINEL,
    extract_config_array_keys,
    extract_relationships,
    mentions_trait,
)


class TestConfigArrayKeys:
    def test_extracts_component_keys(self):
        text = dedent("""
            <?php

            return [
                'name' => 'Invoices',
                'components' => [
                    'invoice-table' => InvoiceTable::class,
                    "invoice-form" => InvoiceForm::class,
                ],
                'per_page' => 25,
            ];
        """)
        keys = extract_config_array_keys(text, "components")
        assert keys == ["invoice-table", "invoice-form"]

    def test_missing_array(self):
        text = "<?php return ['name' => 'Invoices'];"
        assert extract_config_array_keys(text, "components") == []

    def test_empty_array(self):
        text = "<?php return ['components' => []];"
        assert extract_config_array_keys(text, "components") == []

    def test_other_arrays_ignored(self):
        text = dedent("""
            return [
                'routes' => ['web' => true],
                'components' => ['badge' => Badge::class],
            ];
        """)
        assert extract_config_array_keys(text, "components") == ["badge"]


class TestRelationships:
    def test_belongs_to_and_has_many(self):
        text = dedent("""
            class Customer extends Model
            {
                public function company()
                {
                    return $this->belongsTo(Company::class);
                }

                public function contacts()
                {
                    return $this->hasMany(Contact::class);
                }
            }
        """)
        rel = extract_relationships(text)
        assert rel.belongs_to == ["Company::class"]
        assert rel.has_many == ["Contact::class"]
        assert rel.morph_to == []
        assert rel.morph_many == []

    def test_morph_to_is_recorded_as_sentinel(self):
        text = "return $this->morphTo();"
        rel = extract_relationships(text)
        assert rel.morph_to == [MORPH_TO_SENTINEL]

    def test_morph_many_with_name(self):
        text = "return $this->morphMany(Comment::class, 'commentable');"
        rel = extract_relationships(text)
        assert rel.morph_many == ["Comment::class, 'commentable'"]

    def test_has_many_through_not_matched(self):
        text = "return $this->hasManyThrough(Post::class, User::class);"
        assert extract_relationships(text).has_many == []

    def test_empty_source(self):
        assert extract_relationships("").is_empty()


class TestMentionsTrait:
    def test_plain_use(self):
        assert mentions_trait("    use Auditable;", "Auditable")

    def test_has_prefix(self):
        assert mentions_trait("    use HasTranslations;", "Translations")

    def test_not_used(self):
        assert not mentions_trait("class Foo extends Model {}", "Auditable")
