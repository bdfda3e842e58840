"""Built-in PHPUnit templates for extension scaffolding."""

from collections.abc import Mapping


def _namespace_block(ctx: Mapping[str, object]) -> str:
    """Return the ``namespace ...;`` header for namespaced test classes."""
    namespace = str(ctx.get("testNamespace") or "")
    if not namespace:
        return ""
    return f"\nnamespace {namespace};\n"


def _extension_label(ctx: Mapping[str, object]) -> str:
    return str(ctx.get("fullName") or ctx.get("mainFile") or "this extension")


def get_phpunit_xml_template(ctx: Mapping[str, object]) -> str:
    """Generate phpunit.xml.dist for the extension root.

    Args:
        ctx: Generation context (uses ``fullName`` for the suite name)

    Returns:
        Complete phpunit.xml.dist content as string
    """
    suite_name = _extension_label(ctx)
    return f"""<?xml version="1.0"?>
<phpunit backupGlobals="false"
         backupStaticAttributes="false"
         colors="true"
         convertErrorsToExceptions="true"
         convertNoticesToExceptions="true"
         convertWarningsToExceptions="true"
         processIsolation="false"
         stopOnFailure="false"
         bootstrap="tests/phpunit/bootstrap.php">
  <testsuites>
    <testsuite name="{suite_name}">
      <directory>./tests/phpunit</directory>
    </testsuite>
  </testsuites>
  <filter>
    <whitelist>
      <directory suffix=".php">./</directory>
    </whitelist>
  </filter>
  <listeners>
    <listener class="Civi\\Test\\CiviTestListener">
      <arguments/>
    </listener>
  </listeners>
</phpunit>
"""


def get_phpunit_bootstrap_template(ctx: Mapping[str, object]) -> str:
    """Generate tests/phpunit/bootstrap.php which boots CiviCRM through ``cv``."""
    return f"""<?php

// Bootstrap for the PHPUnit tests of {_extension_label(ctx)}.
ini_set('memory_limit', '2G');

// phpcs:disable
eval(cv('php:boot --level=classloader', 'phpcode'));
// phpcs:enable

// Allow autoloading of PHPUnit helper classes in this extension.
$loader = new \\Composer\\Autoload\\ClassLoader();
$loader->add('CRM_', [__DIR__ . '/../..', __DIR__]);
$loader->addPsr4('Civi\\\\', [__DIR__ . '/../../Civi', __DIR__ . '/Civi']);
$loader->add('Civi', [__DIR__ . '/../..', __DIR__]);
$loader->register();

/**
 * Call the "cv" command.
 *
 * @param string $cmd
 *   The rest of the command to send.
 * @param string $decode
 *   Ex: 'json' or 'phpcode'.
 * @return mixed
 *   Response output (if the command executed normally).
 *   For 'raw' or 'phpcode', this will be a string. For 'json', it could be any JSON value.
 * @throws \\RuntimeException
 *   If the command terminates abnormally.
 */
function cv(string $cmd, string $decode = 'json') {{
  $cmd = 'cv ' . $cmd;
  $descriptorSpec = [0 => ['pipe', 'r'], 1 => ['pipe', 'w'], 2 => STDERR];
  $oldOutput = getenv('CV_OUTPUT');
  putenv('CV_OUTPUT=json');

  // Execute `cv` in the original folder. phpunit may change PWD.
  $cmd = sprintf('cd %s; %s', escapeshellarg(getenv('PWD')), $cmd);

  $process = proc_open($cmd, $descriptorSpec, $pipes, __DIR__);
  putenv("CV_OUTPUT=$oldOutput");
  fclose($pipes[0]);
  $result = stream_get_contents($pipes[1]);
  fclose($pipes[1]);
  if (proc_close($process) !== 0) {{
    throw new \\RuntimeException("Command failed ($cmd):\\n$result");
  }}
  switch ($decode) {{
    case 'raw':
      return $result;

    case 'phpcode':
      // If the last output is /*PHPCODE*/, then we managed to complete execution.
      if (substr(trim($result), 0, 12) !== '/*BEGINPHP*/' || substr(trim($result), -10) !== '/*ENDPHP*/') {{
        throw new \\RuntimeException("Command failed ($cmd):\\n$result");
      }}
      return $result;

    case 'json':
      return json_decode($result, 1);

    default:
      throw new \\RuntimeException("Bad decoder format ($decode)");
  }}
}}
"""


def get_headless_test_template(ctx: Mapping[str, object]) -> str:
    """Generate a headless test class (in-process, transactional cleanup)."""
    test_class = ctx["testClass"]
    return f"""<?php
{_namespace_block(ctx)}
use Civi\\Test\\HeadlessInterface;
use Civi\\Test\\HookInterface;
use Civi\\Test\\TransactionalInterface;

/**
 * FIXME - Add test description.
 *
 * Tips:
 *  - With HookInterface, you may implement CiviCRM hooks directly in the test class.
 *    Simply create corresponding functions (e.g. "hook_civicrm_post(...)" or similar).
 *  - With TransactionalInterface, any data changes made by setUp() or test****() functions will
 *    rollback automatically -- as long as you don't manipulate schema or truncate tables.
 *    If this test needs to manipulate schema or truncate tables, then either:
 *       a. Do all that using setupHeadless() and Civi\\Test.
 *       b. Disable TransactionalInterface, and handle all setup/teardown yourself.
 *
 * @group headless
 */
class {test_class} extends \\PHPUnit\\Framework\\TestCase implements HeadlessInterface, HookInterface, TransactionalInterface {{

  /**
   * Setup used when HeadlessInterface is implemented.
   *
   * Civi\\Test has many helpers, like install(), uninstall(), sql(), and sqlFile().
   *
   * @link https://github.com/civicrm/org.civicrm.testapalooza/blob/master/civi-test.md
   *
   * @return \\Civi\\Test\\CiviEnvBuilder
   *
   * @throws \\CRM_Extension_Exception_ParseException
   */
  public function setUpHeadless(): \\Civi\\Test\\CiviEnvBuilder {{
    return \\Civi\\Test::headless()
      ->installMe(__DIR__)
      ->apply();
  }}

  public function setUp(): void {{
    parent::setUp();
  }}

  public function tearDown(): void {{
    parent::tearDown();
  }}

  /**
   * Example: Test that a version is returned.
   */
  public function testWellFormedVersion(): void {{
    $this->assertNotEmpty(\\CRM_Utils_System::version());
  }}

  /**
   * Example: Test that we're using a fake CMS.
   */
  public function testWellFormedUF(): void {{
    $this->assertEquals('UnitTests', CIVICRM_UF);
  }}

}}
"""


def get_e2e_test_template(ctx: Mapping[str, object]) -> str:
    """Generate an end-to-end test class (boots the live site and CMS)."""
    test_class = ctx["testClass"]
    return f"""<?php
{_namespace_block(ctx)}
use Civi\\Test\\EndToEndInterface;

/**
 * FIXME - Add test description.
 *
 * Tips:
 *  - The global variable $_CV has some useful values:
 *     - $_CV['ADMIN_USER']: The username of an administrative user
 *     - $_CV['ADMIN_PASS']: The password of an administrative user
 *     - $_CV['DEMO_USER']: The username of a non-administrative user
 *     - $_CV['DEMO_PASS']: The password of a non-administrative user
 *  - To spawn a new CiviCRM thread and execute an API call or PHP code, use cv(), e.g.
 *      cv('api system.flush');
 *      $data = cv('eval "return Civi::settings()->get(\\'foobar\\');"');
 *      $dashboardUrl = cv('url civicrm/dashboard');
 *  - This template uses the most generic base-class, but you may want to use a more
 *    powerful base class, such as \\PHPUnit_Extensions_SeleniumTestCase or
 *    \\PHPUnit_Extensions_Selenium2TestCase.
 *    See also: https://phpunit.de/manual/4.8/en/selenium.html
 *
 * @group e2e
 * @see cv
 */
class {test_class} extends \\PHPUnit\\Framework\\TestCase implements EndToEndInterface {{

  public static function setUpBeforeClass(): void {{
    // See: https://docs.civicrm.org/dev/en/latest/testing/phpunit/#civitest

    // Example: Install this extension. Don't care about anything else.
    \\Civi\\Test::e2e()->installMe(__DIR__)->apply();

    // Example: Uninstall all extensions except this one.
    // \\Civi\\Test::e2e()->uninstall('*')->installMe(__DIR__)->apply();

    // Example: Install only core civicrm extensions.
    // \\Civi\\Test::e2e()->uninstall('*')->install('org.civicrm.*')->apply();
  }}

  public function setUp(): void {{
    parent::setUp();
  }}

  public function tearDown(): void {{
    parent::tearDown();
  }}

  /**
   * Example: Test that a version is returned.
   */
  public function testWellFormedVersion(): void {{
    $this->assertNotEmpty(\\CRM_Utils_System::version());
  }}

  /**
   * Example: Test that we're using a real CMS (Drupal, WordPress, etc).
   */
  public function testWellFormedUF(): void {{
    $this->assertMatchesRegularExpression('/^(Drupal|Backdrop|WordPress|Joomla|Standalone)/', CIVICRM_UF);
  }}

}}
"""


def get_legacy_test_template(ctx: Mapping[str, object]) -> str:
    """Generate a headless test class built on CiviUnitTestCase."""
    test_class = ctx["testClass"]
    return f"""<?php
{_namespace_block(ctx)}
use Civi\\Test\\HeadlessInterface;
use Civi\\Test\\TransactionalInterface;

/**
 * FIXME - Add test description.
 *
 * This variation of the headless test extends CiviUnitTestCase, which provides
 * helpers such as callAPISuccess() and individualCreate().
 *
 * @group headless
 */
class {test_class} extends \\CiviUnitTestCase implements HeadlessInterface, TransactionalInterface {{

  public function setUpHeadless(): \\Civi\\Test\\CiviEnvBuilder {{
    return \\Civi\\Test::headless()
      ->installMe(__DIR__)
      ->apply();
  }}

  public function setUp(): void {{
    parent::setUp();
  }}

  public function tearDown(): void {{
    parent::tearDown();
  }}

  /**
   * Example: Test that a contact can be created.
   */
  public function testCreateContact(): void {{
    $contactId = $this->individualCreate();
    $this->assertGreaterThan(0, $contactId);
  }}

}}
"""
