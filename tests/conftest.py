"""Shared unixref fixtures."""

from __future__ import annotations

import pytest

from doi_query.infrastructure.xml.element_document import parse_document

JOURNAL_XML = """<?xml version="1.0" encoding="UTF-8"?>
<doi_records>
  <doi_record owner="10.1038" timestamp="2013-08-05">
    <crossref xmlns="http://www.crossref.org/xschema/1.0"
              xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
      <journal>
        <journal_metadata language="en">
          <full_title>Nature</full_title>
          <abbrev_title>Nature</abbrev_title>
          <issn media_type="print">0028-0836</issn>
        </journal_metadata>
        <journal_issue>
          <publication_date media_type="print">
            <month>08</month>
            <day>29</day>
            <year>2013</year>
          </publication_date>
          <journal_volume>
            <volume>500</volume>
          </journal_volume>
          <issue>7464</issue>
        </journal_issue>
        <journal_article publication_type="full_text">
          <titles>
            <title>Nanometre-scale thermometry in a living cell</title>
          </titles>
          <contributors>
            <person_name sequence="first" contributor_role="author">
              <given_name>G.</given_name>
              <surname>Kucsko</surname>
            </person_name>
            <person_name sequence="additional" contributor_role="author">
              <given_name>P. C.</given_name>
              <surname>Maurer</surname>
            </person_name>
            <person_name sequence="additional" contributor_role="editor">
              <given_name>Ed</given_name>
              <surname>Itor</surname>
            </person_name>
          </contributors>
          <pages>
            <first_page>54</first_page>
            <last_page>58</last_page>
          </pages>
        </journal_article>
      </journal>
    </crossref>
  </doi_record>
</doi_records>
"""

BOOK_XML = """<doi_records>
  <doi_record>
    <crossref>
      <book book_type="edited_book">
        <book_series_metadata>
          <series_metadata>
            <titles><title>Lecture Notes in Computer Science</title></titles>
          </series_metadata>
          <titles><title>Algorithms in Practice</title></titles>
          <volume>42</volume>
        </book_series_metadata>
        <content_item component_type="chapter">
          <contributors>
            <person_name contributor_role="author" sequence="first">
              <given_name>Ada</given_name>
              <surname>Lovelace</surname>
            </person_name>
          </contributors>
          <titles><title>On Engines</title></titles>
          <publication_date><year>1843</year></publication_date>
          <pages><first_page>1</first_page></pages>
        </content_item>
      </book>
    </crossref>
  </doi_record>
</doi_records>
"""


@pytest.fixture
def journal_document():
    return parse_document(JOURNAL_XML)


@pytest.fixture
def book_document():
    return parse_document(BOOK_XML)


@pytest.fixture
def make_document():
    """Parse an inline XML snippet."""
    return parse_document


@pytest.fixture
def journal_xml():
    return JOURNAL_XML
