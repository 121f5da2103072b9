"""Shared pytest fixtures for wtfdict tests."""

import logging
import textwrap

import pytest

from wtfdict.document import parse_document


PRONOUNCE_HTML = textwrap.dedent(
    """
    <html><body>
      <div class="baav">
        <span class="pronounce">hə'ləʊ
          <span class="phonetic">[misc]</span>
        </span>
      </div>
      <div id="phrsListTab">
        <div class="trans-container">
          <ul>
            <li> int. 喂；哈罗 </li>
            <li>n. 表示问候</li>
          </ul>
        </div>
      </div>
    </body></html>
    """
)

ENG_HTML = textwrap.dedent(
    """
    <html><body>
      <div id="phrsListTab">
        <div class="trans-container">
          <ul>
            <p class="wordGroup">
              <span style="font-weight: bold; color: #959595;">n.</span>
              <span class="contentTitle"><a class="search-js" href="/w/eng/greeting/"> greeting </a></span>
            </p>
            <p class="wordGroup">
              <span>v.</span>
              <span class="contentTitle"><a class="search-js" href="/w/eng/greet/">greet</a>;</span>
              <span class="contentTitle"><a class="search-js" href="/w/eng/salute/">salute</a></span>
            </p>
          </ul>
        </div>
      </div>
    </body></html>
    """
)

JAP_HTML = textwrap.dedent(
    """
    <html><body>
      <div id="results-contents">
        <div class="trans-container">
          <ul class="ol">
            <li><p class="sense-title">猫</p></li>
            <li><p class="sense-title">   </p></li>
            <li><p class="sense-title">ねこ</p></li>
          </ul>
          <ul class="ul">
            <li>
              <p class="sense-title"> 【名】 猫 </p>
              <ul class="sense-ex">
                <li>
                  <p>猫を飼う。
                     <span>ねこをかう</span></p>
                  <p class="exam-sen"> 养猫。 </p>
                </li>
              </ul>
            </li>
          </ul>
        </div>
      </div>
    </body></html>
    """
)

WEB_HTML = textwrap.dedent(
    """
    <html><body>
      <div id="tWebTrans">
        <div class="wt-container">
          <div class="title"><a class="sp do-detail" href="#"></a><span>
              你好
            </span></div>
          <p class="collapse-content">
              你好；您好；哈喽
              <br>
              基于1045个网页
          </p>
        </div>
        <div class="wt-container">
          <div class="title"><span>无内容</span></div>
        </div>
      </div>
      <div id="webPhrase">
        <p class="wordGroup"><span class="contentTitle"><a href="#">say hi</a></span>
            你好
            ;
            打招呼
        </p>
        <p class="wordGroup"><span class="contentTitle"><a href="#">alone</a></span></p>
      </div>
    </body></html>
    """
)


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("wtfdict.tests")


@pytest.fixture
def pronounce_doc():
    return parse_document(PRONOUNCE_HTML)


@pytest.fixture
def eng_doc():
    return parse_document(ENG_HTML)


@pytest.fixture
def jap_doc():
    return parse_document(JAP_HTML)


@pytest.fixture
def web_doc():
    return parse_document(WEB_HTML)


@pytest.fixture
def pronounce_html() -> str:
    return PRONOUNCE_HTML


@pytest.fixture
def eng_html() -> str:
    return ENG_HTML
